"""Custom exception hierarchy for git-cloner."""


class ClonerError(Exception):
    """Base error for all custom exceptions."""


class ParseError(ClonerError):
    """Raised when a repository reference cannot be turned into a URL."""


class WorkspaceError(ClonerError):
    """Raised when the destination directory tree cannot be created."""


class GitCommandError(ClonerError):
    """Raised when a git invocation cannot be started or read."""

    def __init__(self, command: list[str], detail: str | None = None):
        message = "Git command failed"
        if command:
            message = f"Git command failed: {' '.join(command)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.command = command
        self.detail = detail or ""


class ListingError(ClonerError):
    """Raised when the repository listing command fails or returns bad data."""


class UnsupportedHostError(ListingError):
    """Raised when listing is requested for a host without a listing backend."""


class ValidationError(ClonerError):
    """Raised when user input is invalid."""
