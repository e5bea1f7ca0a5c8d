class GitGuideError(Exception):
    """Base exception for git-guide errors."""


class GitCommandError(GitGuideError):
    """Raised when a git command exits with an unexpected status."""


class CommitFailedError(GitGuideError):
    """Raised when ``git commit`` fails."""

    def __init__(self, output: str) -> None:
        super().__init__(output or "Unknown git commit error")
        self.output = output


class InvalidCommitTypeError(GitGuideError):
    """Raised when a commit type index is outside the catalog."""
