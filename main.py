"""
Command-line interface for gitx.
"""

import sys
from typing import Optional

import typer

from config import logger
from errors import DecodeError, FetchError, RenderError
from github_client import fetch_repos
import progress
from repo_filter import ALL_LANGUAGES
from table_renderer import TerminalGeometry, render_repos

app = typer.Typer(
    name="gitx",
    help="Get your github repos state instantly",
    no_args_is_help=True,
)


def _require_username(value: str) -> str:
    if value is not None and not value.strip():
        raise typer.BadParameter("username must not be empty")
    return value


@app.callback()
def gitx():
    """Get your github repos state instantly"""


@app.command()
def repos(
    username: str = typer.Argument(
        ..., help="GitHub username", callback=_require_username
    ),
    number: int = typer.Option(
        5,
        "--number",
        "-n",
        min=1,
        help="Maximum number of repositories to list",
    ),
    language: str = typer.Option(
        ALL_LANGUAGES,
        "--language",
        "-l",
        help="The language of the repository",
    ),
    spinner: Optional[bool] = typer.Option(
        None,
        "--spinner/--no-spinner",
        help="Show progress while fetching (default: only on a terminal)",
    ),
) -> None:
    """
    List the (public) repositories of a GitHub user.
    """
    if spinner is None:
        spinner = sys.stdout.isatty()

    events = progress.new_event_queue()
    display = progress.SpinnerDisplay(events).start() if spinner else None
    try:
        found = fetch_repos(username, language, number, events)
    except (FetchError, DecodeError) as e:
        logger.info(f"Repository fetch failed: {e}")
        print("Error during repository fetch", e)
        return
    finally:
        if display is not None:
            display.stop()

    try:
        table = render_repos(found, TerminalGeometry(sys.stdout))
    except RenderError as e:
        logger.info(f"Rendering failed: {e}")
        print("Error rendering repositories table", e)
        return

    print(table, end="")


def run():
    """Entry point for the gitx command."""
    app()


if __name__ == "__main__":
    run()
