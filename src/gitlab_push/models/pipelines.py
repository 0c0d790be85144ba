"""Pipeline models."""

from __future__ import annotations

from .base import GitLabModel
from .common import User


class Pipeline(GitLabModel):
    id: int
    iid: int = 0
    status: str = ""
    ref: str = ""
    sha: str = ""
    web_url: str = ""
    created_at: str = ""
    updated_at: str = ""
    source: str = ""
    user: User | None = None
