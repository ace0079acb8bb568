"""
GitHub API client for fetching a user's public repositories.
"""

from dataclasses import dataclass
from datetime import datetime

import requests

from config import get_api_url, get_timeout, logger
from errors import DecodeError, FetchError
import progress
from repo_filter import filter_repos


@dataclass(frozen=True)
class Repository:
    """Immutable repository record."""

    name: str
    description: str
    language: str
    updated_at: datetime
    url: str
    is_fork: bool

    @classmethod
    def from_json(cls, data):
        """
        Build a record from one element of the /users/{username}/repos payload.

        Raises:
            DecodeError: If a required field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"expected a repository object, got {type(data).__name__}")
        try:
            name = data["name"]
            url = data["svn_url"]
            is_fork = data["fork"]
            updated = data["updated_at"]
        except KeyError as e:
            raise DecodeError(f"repository is missing field {e.args[0]!r}") from e

        if not isinstance(name, str) or not isinstance(url, str):
            raise DecodeError(f"repository {name!r} has a non-string name or url")
        if not isinstance(is_fork, bool):
            raise DecodeError(f"repository {name!r} has a non-boolean fork flag")
        try:
            updated_at = datetime.fromisoformat(updated.replace("Z", "+00:00"))
        except (AttributeError, ValueError) as e:
            raise DecodeError(f"repository {name!r} has an invalid updated_at: {updated!r}") from e

        return cls(
            name=name,
            description=data.get("description") or "",
            language=data.get("language") or "",
            updated_at=updated_at,
            url=url,
            is_fork=is_fork,
        )


def decode_repos(payload):
    """Decode a parsed JSON body into a list of Repository records."""
    if not isinstance(payload, list):
        raise DecodeError(f"expected a JSON array, got {type(payload).__name__}")
    return [Repository.from_json(item) for item in payload]


def repos_url(username, max_results):
    return f"{get_api_url()}/users/{username}/repos?per_page={max_results}&sort=update"


def fetch_repos(username, language="all", max_results=5, events=None):
    """
    Fetch the public repositories of a GitHub user and keep the non-fork ones
    matching the language filter.

    Args:
        username (str): The GitHub username.
        language (str): Lower-case language name, or "all" to keep every language.
        max_results (int): Page size requested from the API.
        events (queue.Queue, optional): Receives stage names for a progress display.
            Closed before returning, whatever the outcome.

    Returns:
        list[Repository]: The filtered records, in the order the API returned them.

    Raises:
        FetchError: On transport failure or a non-200 status.
        DecodeError: If the body is not a JSON array of repositories.
    """
    try:
        if not username:
            raise ValueError("username must not be empty")
        if max_results < 1:
            raise ValueError(f"max_results must be positive, got {max_results}")

        progress.emit(events, "Fetching data from github")
        url = repos_url(username, max_results)
        logger.info(f"Fetching repositories for {username}: {url}")
        try:
            response = requests.get(
                url,
                headers={"Accept": "application/vnd.github.v3+json"},
                timeout=get_timeout(),
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to GitHub failed: {e}")
            raise FetchError(username, f"failed to reach GitHub for user {username}: {e}") from e

        with response:
            progress.emit(events, "Verifying response")
            if response.status_code != 200:
                status = f"{response.status_code} {response.reason or ''}".strip()
                logger.error(f"GitHub API Error for {username}: {status}")
                raise FetchError(
                    username,
                    f"failed to fetch repositories for user {username}: {status}",
                    status=status,
                )
            try:
                payload = response.json()
            except ValueError as e:
                raise DecodeError(f"response is not valid JSON: {e}") from e

        repos = decode_repos(payload)
        logger.debug(f"Decoded {len(repos)} repositories for {username}")

        progress.emit(events, "Filtering repositories")
        return filter_repos(repos, language)
    finally:
        progress.close(events)
