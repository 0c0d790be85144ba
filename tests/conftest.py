"""Shared test fixtures for gitlab-push."""

from __future__ import annotations

import pytest
import respx

from gitlab_push.client import GitLabClient
from gitlab_push.config import GitLabConfig

TEST_URL = "https://gitlab.example.com"
TEST_TOKEN = "test-token"
API = f"{TEST_URL}/api/v4"
PROJECT = "my-group%2Fmy-project"


class CountingThrottle:
    """Throttle that grants immediately and records every acquisition."""

    def __init__(self, name: str, log: list[str] | None = None) -> None:
        self.name = name
        self.log = log if log is not None else []
        self.count = 0

    async def acquire(self) -> None:
        self.count += 1
        self.log.append(self.name)


@pytest.fixture
def config() -> GitLabConfig:
    return GitLabConfig(url=TEST_URL, token=TEST_TOKEN)


@pytest.fixture
async def client(config: GitLabConfig) -> GitLabClient:
    gl = GitLabClient(config)
    yield gl
    await gl.close()


@pytest.fixture
def mock_api() -> respx.MockRouter:
    with respx.mock(base_url=API, assert_all_called=False) as router:
        yield router


@pytest.fixture
def permits() -> list[str]:
    return []


@pytest.fixture
def api_throttle(permits: list[str]) -> CountingThrottle:
    return CountingThrottle("api", permits)


@pytest.fixture
def push_throttle(permits: list[str]) -> CountingThrottle:
    return CountingThrottle("push", permits)


@pytest.fixture
def make_mr():
    """Factory for merge request API payloads."""

    def _make(**overrides) -> dict:
        data = {
            "id": 1001,
            "iid": 7,
            "title": "Fix bug",
            "description": "Details here",
            "state": "opened",
            "source_branch": "fix-1",
            "target_branch": "master",
            "sha": "abc123",
            "web_url": f"{TEST_URL}/my-group/my-project/-/merge_requests/7",
            "pipeline": {
                "id": 99,
                "status": "running",
                "ref": "fix-1",
                "sha": "abc123",
                "web_url": f"{TEST_URL}/my-group/my-project/-/pipelines/99",
            },
        }
        data.update(overrides)
        return data

    return _make
