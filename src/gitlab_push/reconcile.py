"""Find-or-create reconciliation of the merge request for a pushed branch."""

from __future__ import annotations

import logging

from .client import GitLabClient
from .exceptions import GitLabApiError, MergeRequestReconcileError
from .models.merge_requests import MergeRequest, MergeRequestSpec
from .throttle import Throttle

logger = logging.getLogger(__name__)


async def find_or_create_merge_request(
    client: GitLabClient,
    project_path: str,
    spec: MergeRequestSpec,
    api_throttle: Throttle,
    push_throttle: Throttle,
) -> MergeRequest:
    """Make sure exactly one open MR for ``spec``'s branches exists with the desired title and description.

    Creation is attempted first. When GitLab reports that an open MR already
    exists for the source branch, that MR is looked up and its title and
    description are rewritten if they drifted. Every other error is raised
    unchanged.

    Raises:
        GitLabApiError: creation, listing or update failed.
        MergeRequestReconcileError: the conflict did not resolve to exactly
            one open MR.
    """
    await push_throttle.acquire()
    await api_throttle.acquire()
    try:
        created = await client.create_merge_request(project_path, spec.to_params())
    except GitLabApiError as e:
        if not e.is_merge_request_conflict:
            raise
        logger.info(
            "Open MR already exists for %s -> %s in %s",
            spec.source_branch,
            spec.target_branch,
            project_path,
        )
    else:
        mr = MergeRequest.model_validate(created)
        logger.info("Created MR !%d in %s", mr.iid, project_path)
        return mr

    await api_throttle.acquire()
    existing = await client.list_merge_requests(
        project_path,
        {
            "source_branch": spec.source_branch,
            "target_branch": spec.target_branch,
            "state": "opened",
        },
    )
    existing = existing or []
    if len(existing) != 1:
        raise MergeRequestReconcileError(len(existing))

    mr = MergeRequest.model_validate(existing[0])
    if not spec.differs_from(mr):
        return mr

    await api_throttle.acquire()
    updated = await client.update_merge_request(
        project_path,
        mr.iid,
        {
            "title": spec.title,
            "description": spec.description,
            "target_branch": spec.target_branch,
        },
    )
    logger.info("Updated title/description of MR !%d in %s", mr.iid, project_path)
    return MergeRequest.model_validate(updated)
