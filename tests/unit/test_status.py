"""Tests for pipeline status lookup."""

from __future__ import annotations

import httpx
import pytest

from gitlab_push.exceptions import PipelineLookupError
from gitlab_push.status import NO_PIPELINE_FOUND, get_pipeline_status

PIPELINES = "/projects/my-group%2Fmy-project/pipelines"


@pytest.mark.asyncio
async def test_returns_first_pipeline_status(client, mock_api):
    route = mock_api.get(PIPELINES).mock(
        return_value=httpx.Response(
            200,
            json=[
                {"id": 12, "status": "running", "sha": "abc123"},
                {"id": 11, "status": "failed", "sha": "abc123"},
            ],
        )
    )

    status = await get_pipeline_status(client, "my-group/my-project", "abc123")

    assert status == "running"
    assert route.calls.last.request.url.params["sha"] == "abc123"


@pytest.mark.asyncio
async def test_no_pipeline_is_not_an_error(client, mock_api):
    mock_api.get(PIPELINES).mock(return_value=httpx.Response(200, json=[]))

    status = await get_pipeline_status(client, "my-group/my-project", "abc123")

    assert status == NO_PIPELINE_FOUND == "No pipeline was found"


@pytest.mark.asyncio
async def test_api_failure(client, mock_api):
    mock_api.get(PIPELINES).mock(return_value=httpx.Response(500, text="boom"))

    with pytest.raises(PipelineLookupError, match="cannot get pipeline status"):
        await get_pipeline_status(client, "my-group/my-project", "abc123")


@pytest.mark.asyncio
async def test_transport_failure(client, mock_api):
    mock_api.get(PIPELINES).mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(PipelineLookupError) as exc_info:
        await get_pipeline_status(client, "my-group/my-project", "abc123")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_acquires_permit(client, mock_api, api_throttle):
    mock_api.get(PIPELINES).mock(return_value=httpx.Response(200, json=[]))

    await get_pipeline_status(client, "my-group/my-project", "abc123", api_throttle)

    assert api_throttle.count == 1
