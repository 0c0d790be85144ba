"""Push a local commit and open or refresh its merge request."""

from __future__ import annotations

import logging

from .client import GitLabClient
from .config import GitLabConfig
from .git import force_push, get_head_sha
from .models.merge_requests import MergeRequestSpec
from .models.push import PushInput, PushOutput
from .reconcile import find_or_create_merge_request
from .status import get_pipeline_status
from .throttle import Throttle

logger = logging.getLogger(__name__)


def split_commit_message(message: str, body: str = "") -> tuple[str, str]:
    """Split a commit message into an MR title and description.

    The first line is the title and the rest, minus leading blank or
    whitespace-only lines, the description. A non-empty *body* replaces
    the description.
    """
    title, sep, rest = message.partition("\n")
    if body:
        return title, body
    if not sep:
        return message, ""
    lines = rest.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    return title, "\n".join(lines)


async def push(
    push_input: PushInput,
    api_throttle: Throttle,
    push_throttle: Throttle,
    *,
    client: GitLabClient | None = None,
    config: GitLabConfig | None = None,
) -> PushOutput:
    """Push HEAD of ``push_input.plan_dir`` and return the state of its merge request.

    Every step runs in order and the first failure is raised to the caller:
    ``GitCommandError`` from git, ``GitLabApiError`` or
    ``MergeRequestReconcileError`` from the MR step and ``PipelineLookupError``
    from the status step.
    """
    config = config or (client.config if client else GitLabConfig.from_env())

    head_sha = await get_head_sha(push_input.plan_dir)
    logger.debug("HEAD of %s is %s", push_input.plan_dir, head_sha)
    await force_push(push_input.plan_dir, push_input.branch_name)

    title, description = split_commit_message(push_input.commit_message, push_input.pr_body)
    spec = MergeRequestSpec(
        title=title,
        description=description,
        source_branch=push_input.branch_name,
        target_branch=config.target_branch,
    )

    owns_client = client is None
    if client is None:
        client = GitLabClient(config)
    try:
        mr = await find_or_create_merge_request(
            client, push_input.project_path, spec, api_throttle, push_throttle
        )
        sha = mr.sha or head_sha
        status = await get_pipeline_status(client, push_input.project_path, sha, api_throttle)
    finally:
        if owns_client:
            await client.close()

    return PushOutput(
        success=True,
        commit_sha=sha,
        pull_request_number=mr.iid,
        pull_request_url=mr.web_url,
        pull_request_combined_status=status,
        pull_request_assignee=push_input.pr_assignee,
        ci_build_url=mr.pipeline.web_url if mr.pipeline else "",
    )
