"""Merge request models."""

from __future__ import annotations

from typing import Any

from .base import GitLabModel
from .common import PipelineRef, User


class MergeRequest(GitLabModel):
    id: int
    iid: int
    title: str = ""
    description: str | None = None
    state: str = ""
    source_branch: str = ""
    target_branch: str = ""
    author: User | None = None
    assignee: User | None = None
    sha: str = ""
    web_url: str = ""
    pipeline: PipelineRef | None = None


class MergeRequestSpec(GitLabModel):
    """Desired state of the MR for a pushed branch."""

    model_config = {"frozen": True}

    title: str
    description: str = ""
    source_branch: str
    target_branch: str = "master"

    def differs_from(self, mr: MergeRequest) -> bool:
        """Whether *mr* needs its title or description rewritten to match."""
        return mr.title != self.title or (mr.description or "") != self.description

    def to_params(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "source_branch": self.source_branch,
            "target_branch": self.target_branch,
        }
