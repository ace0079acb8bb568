"""
Configuration module for gitx.
Handles environment variable loading and logging.
"""

import pathlib
import os
from dotenv import load_dotenv
import logging
import sys

# Load environment variables (.env files)
# Strategy: 1. Project-level .env, then 2. Working directory .env
script_dir = pathlib.Path(__file__).parent
load_dotenv(script_dir / ".env")
load_dotenv(pathlib.Path.cwd() / ".env")

DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level():
    """Returns the log level name from GITX_LOG_LEVEL, or the default if unknown."""
    name = os.getenv("GITX_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


# Logging goes to stderr so stdout only carries the rendered table
logging.basicConfig(
    level=get_log_level(),
    handlers=[logging.StreamHandler(sys.stderr)],
    format="%(asctime)s [gitx] %(levelname)s %(message)s"
)

logger = logging.getLogger("gitx")

DEFAULT_API_URL = "https://api.github.com"

# Seconds before an unanswered request to the API is abandoned
DEFAULT_TIMEOUT = 10

# ANSI 256 palette index used for the table border
DEFAULT_BORDER_COLOR = "92"


def get_api_url():
    """Returns the GitHub REST API base URL, without a trailing slash."""
    return os.getenv("GITX_API_URL", DEFAULT_API_URL).rstrip("/")


def get_timeout():
    """Returns the HTTP request timeout in seconds."""
    value = os.getenv("GITX_TIMEOUT")
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid GITX_TIMEOUT value: {value!r}")
        return DEFAULT_TIMEOUT
    if not timeout > 0:
        logger.warning(f"Ignoring non-positive GITX_TIMEOUT value: {value!r}")
        return DEFAULT_TIMEOUT
    return timeout


def get_border_color():
    """Returns the border color of the repositories table."""
    return os.getenv("GITX_BORDER_COLOR") or DEFAULT_BORDER_COLOR
