"""gitlab-push exceptions."""

from __future__ import annotations

from collections.abc import Sequence

MR_EXISTS_MARKER = "merge request already exists"


class GitLabError(Exception):
    """Base exception for gitlab-push operations."""


class GitLabApiError(GitLabError):
    """Raised when the GitLab API returns a non-success response."""

    def __init__(self, status_code: int, status_text: str, body: str = "") -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"GitLab API Error {status_code} {status_text}: {body}")

    @property
    def is_merge_request_conflict(self) -> bool:
        """True when GitLab refused to create an MR because an open one already exists.

        GitLab answers 409 for this case. The body text is matched as well
        for responses that carry another status.
        """
        return self.status_code == 409 or MR_EXISTS_MARKER in str(self).lower()


class GitLabAuthError(GitLabApiError):
    """Raised on 401/403 authentication failures."""

    def __init__(self, status_code: int, body: str = "") -> None:
        status_text = "Unauthorized" if status_code == 401 else "Forbidden"
        super().__init__(status_code, status_text, body)


class GitLabNotFoundError(GitLabApiError):
    """Raised on 404 responses."""

    def __init__(self, body: str = "") -> None:
        super().__init__(404, "Not Found", body)


class GitCommandError(GitLabError):
    """Raised when a git subprocess exits non-zero. The message is git's combined output."""

    def __init__(self, output: str, args: Sequence[str] = (), returncode: int | None = None) -> None:
        self.output = output
        self.command = list(args)
        self.returncode = returncode
        super().__init__(output)


class MergeRequestReconcileError(GitLabError):
    """Raised when an MR conflict does not resolve to exactly one open MR."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__("unexpected: found more than 1 MR for branch")


class PipelineLookupError(GitLabError):
    """Raised when the pipelines for a commit cannot be listed."""

    def __init__(self) -> None:
        super().__init__("unexpected: cannot get pipeline status")
