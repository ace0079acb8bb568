"""gitx exception classes."""


class GitxError(Exception):
    """Base exception for all gitx errors."""


class FetchError(GitxError):
    """Raised on transport failures or a non-200 answer from the repos endpoint."""

    def __init__(self, username: str, message: str, status: str | None = None) -> None:
        self.username = username
        self.status = status
        super().__init__(message)


class DecodeError(GitxError):
    """Raised when the response body is not the expected JSON array of repositories."""


class TerminalError(GitxError):
    """Raised when the terminal size cannot be determined."""


class RenderError(GitxError):
    """Raised when the repositories table cannot be built or positioned."""
