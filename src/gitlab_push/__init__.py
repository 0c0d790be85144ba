"""Push a commit to GitLab, open or refresh its merge request and report the pipeline status."""

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from .config import GitLabConfig
from .models.push import PushInput, PushOutput
from .runner import push, split_commit_message
from .throttle import make_throttle

__all__ = ["main", "push", "split_commit_message"]


@click.command()
@click.option(
    "--plan-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Git working tree holding the commit to push",
)
@click.option("--branch", "branch_name", required=True, help="Branch to force-push HEAD to")
@click.option("--message", "commit_message", help="Commit message (first line becomes the MR title)")
@click.option(
    "--message-file",
    type=click.File("r"),
    help="Read the commit message from a file",
)
@click.option("--body", default="", help="MR description overriding the commit message body")
@click.option("--body-file", type=click.File("r"), help="Read the MR description from a file")
@click.option("--owner", "repo_owner", required=True, help="Project namespace")
@click.option("--repo", "repo_name", required=True, help="Project name")
@click.option("--assignee", "pr_assignee", default="", help="Assignee reported in the result")
@click.option("--target-branch", envvar="GITLAB_TARGET_BRANCH", help="MR target branch [default: master]")
@click.option("--api-interval", type=float, envvar="GITLAB_API_INTERVAL", help="Seconds between API calls")
@click.option("--push-interval", type=float, envvar="GITLAB_PUSH_INTERVAL", help="Seconds between MR creations")
@click.option("--gitlab-url", envvar="GITLAB_URL", help="GitLab instance URL")
@click.option("--gitlab-token", envvar="GITLAB_API_TOKEN", help="GitLab personal access token")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    plan_dir: Path,
    branch_name: str,
    commit_message: str | None,
    message_file,
    body: str,
    body_file,
    repo_owner: str,
    repo_name: str,
    pr_assignee: str,
    target_branch: str | None,
    api_interval: float | None,
    push_interval: float | None,
    gitlab_url: str | None,
    gitlab_token: str | None,
    verbose: bool,
) -> None:
    """Push HEAD to BRANCH and open or update its merge request."""
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if message_file is not None:
        commit_message = message_file.read()
    if not commit_message:
        raise click.UsageError("one of --message or --message-file is required")
    if body_file is not None:
        body = body_file.read()

    if gitlab_url:
        os.environ["GITLAB_URL"] = gitlab_url
    if gitlab_token:
        os.environ["GITLAB_API_TOKEN"] = gitlab_token

    try:
        config = GitLabConfig.from_env()
        if target_branch:
            config.target_branch = target_branch
        if api_interval is not None:
            config.api_interval = api_interval
        if push_interval is not None:
            config.push_interval = push_interval
        config.validate()

        push_input = PushInput(
            plan_dir=plan_dir,
            branch_name=branch_name,
            commit_message=commit_message,
            pr_body=body,
            repo_owner=repo_owner,
            repo_name=repo_name,
            pr_assignee=pr_assignee,
        )
        result = asyncio.run(_run(push_input, config))
    except Exception as e:
        logging.getLogger(__name__).debug("push failed", exc_info=True)
        result = PushOutput.failure(e)

    click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    if not result.success:
        sys.exit(1)


async def _run(push_input: PushInput, config: GitLabConfig) -> PushOutput:
    return await push(
        push_input,
        make_throttle(config.api_interval),
        make_throttle(config.push_interval),
        config=config,
    )


if __name__ == "__main__":
    main()
