"""Git subprocess helpers: locate the HEAD commit and force-push it."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path

from .exceptions import GitCommandError

logger = logging.getLogger(__name__)


async def run_git(cwd: str | Path, *args: str) -> str:
    """Run ``git <args>`` in *cwd* and return its combined stdout/stderr.

    Raises:
        GitCommandError: git is missing or exited non-zero. The message is
            the raw combined output.

    If the awaiting task is cancelled the subprocess is killed before the
    cancellation propagates.
    """
    argv = ["git", *args]
    logger.debug("Running %s in %s", " ".join(argv), cwd)
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            cwd=str(cwd),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
    except FileNotFoundError as e:
        raise GitCommandError(f"Git command not found - is git installed? ({e})", argv) from e

    try:
        stdout, _ = await proc.communicate()
    except asyncio.CancelledError:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()
        raise

    output = stdout.decode(errors="replace")
    if proc.returncode != 0:
        raise GitCommandError(output, argv, proc.returncode)
    return output


async def get_head_sha(plan_dir: str | Path) -> str:
    """Return the hash of the last commit in *plan_dir*."""
    output = await run_git(plan_dir, "log", "-1", "--pretty=format:%H")
    return output.strip()


async def force_push(plan_dir: str | Path, branch_name: str) -> None:
    """Force-push HEAD of *plan_dir* onto *branch_name* at ``origin``, replacing whatever was there."""
    output = await run_git(plan_dir, "push", "-f", "origin", f"HEAD:{branch_name}")
    logger.info("Pushed HEAD to origin/%s", branch_name)
    if output:
        logger.debug("git push: %s", output.strip())
