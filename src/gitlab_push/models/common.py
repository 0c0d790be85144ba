"""Common GitLab models shared across domains."""

from __future__ import annotations

from .base import GitLabModel


class User(GitLabModel):
    id: int
    username: str = ""
    name: str = ""
    web_url: str = ""


class PipelineRef(GitLabModel):
    id: int
    status: str = ""
    ref: str = ""
    sha: str = ""
    web_url: str = ""
