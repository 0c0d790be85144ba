"""gitlab-push configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

TOKEN_ENV_VARS = (
    "GITLAB_API_TOKEN",
    "GITLAB_TOKEN",
    "GITLAB_PAT",
    "GITLAB_PERSONAL_ACCESS_TOKEN",
)


@dataclass
class GitLabConfig:
    """Configuration for pushing and opening merge requests, loaded from environment variables."""

    url: str = ""
    token: str = ""
    timeout: int = 30
    ssl_verify: bool = True
    target_branch: str = "master"
    api_interval: float = 1.0
    push_interval: float = 0.0

    @classmethod
    def from_env(cls) -> GitLabConfig:
        url = os.getenv("GITLAB_URL", "").rstrip("/")
        token = next((os.environ[name] for name in TOKEN_ENV_VARS if os.getenv(name)), "")
        timeout = int(os.getenv("GITLAB_TIMEOUT", "30"))
        ssl_verify = os.getenv("GITLAB_SSL_VERIFY", "true").lower() not in (
            "false",
            "0",
            "no",
        )
        target_branch = os.getenv("GITLAB_TARGET_BRANCH") or "master"
        api_interval = float(os.getenv("GITLAB_API_INTERVAL", "1.0"))
        push_interval = float(os.getenv("GITLAB_PUSH_INTERVAL", "0.0"))

        return cls(
            url=url,
            token=token,
            timeout=timeout,
            ssl_verify=ssl_verify,
            target_branch=target_branch,
            api_interval=api_interval,
            push_interval=push_interval,
        )

    @property
    def api_url(self) -> str:
        return f"{self.url}/api/v4"

    def validate(self) -> None:
        if not self.url:
            msg = "GITLAB_URL environment variable is required"
            raise ValueError(msg)
        if not self.token:
            msg = f"GitLab token is required. Set one of: {', '.join(TOKEN_ENV_VARS)}"
            raise ValueError(msg)
        if self.api_interval < 0 or self.push_interval < 0:
            msg = "Throttle intervals must not be negative"
            raise ValueError(msg)
