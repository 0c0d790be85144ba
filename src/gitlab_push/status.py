"""Pipeline status lookup for a commit."""

from __future__ import annotations

import logging

import httpx

from .client import GitLabClient
from .exceptions import GitLabError, PipelineLookupError
from .models.pipelines import Pipeline
from .throttle import Throttle

logger = logging.getLogger(__name__)

NO_PIPELINE_FOUND = "No pipeline was found"


async def get_pipeline_status(
    client: GitLabClient,
    project_path: str,
    sha: str,
    throttle: Throttle | None = None,
) -> str:
    """Return the status of the most recent pipeline for *sha*, or ``NO_PIPELINE_FOUND``."""
    if throttle is not None:
        await throttle.acquire()
    try:
        pipelines = await client.list_pipelines(project_path, {"sha": sha})
    except (GitLabError, httpx.HTTPError) as e:
        logger.debug("Listing pipelines for %s failed: %s", sha, e)
        raise PipelineLookupError from e

    if not pipelines:
        return NO_PIPELINE_FOUND
    return Pipeline.model_validate(pipelines[0]).status
