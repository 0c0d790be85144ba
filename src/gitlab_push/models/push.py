"""Input and result of a single push invocation."""

from __future__ import annotations

from pathlib import Path

from .base import GitLabModel


class PushInput(GitLabModel):
    model_config = {"frozen": True}

    plan_dir: Path
    branch_name: str
    commit_message: str
    pr_body: str = ""
    repo_owner: str
    repo_name: str
    pr_assignee: str = ""

    @property
    def project_path(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"


class PushOutput(GitLabModel):
    success: bool
    commit_sha: str = ""
    pull_request_number: int = 0
    pull_request_url: str = ""
    pull_request_combined_status: str = ""
    pull_request_assignee: str = ""
    ci_build_url: str = ""
    error: str | None = None

    @classmethod
    def failure(cls, error: BaseException | str) -> PushOutput:
        return cls(success=False, error=str(error))
