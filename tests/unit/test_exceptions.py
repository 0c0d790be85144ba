"""Tests for exceptions."""

from gitlab_push.exceptions import (
    GitCommandError,
    GitLabApiError,
    GitLabAuthError,
    GitLabNotFoundError,
    MergeRequestReconcileError,
    PipelineLookupError,
)


def test_api_error():
    e = GitLabApiError(500, "Internal Server Error", "something broke")
    assert e.status_code == 500
    assert "500" in str(e)
    assert "something broke" in str(e)
    assert not e.is_merge_request_conflict


def test_auth_error_401():
    e = GitLabAuthError(401)
    assert e.status_code == 401
    assert "Unauthorized" in str(e)


def test_auth_error_403():
    e = GitLabAuthError(403)
    assert "Forbidden" in str(e)


def test_not_found_error():
    e = GitLabNotFoundError("resource not found")
    assert e.status_code == 404


def test_conflict_by_status():
    e = GitLabApiError(409, "Conflict", '{"message":["Another open merge request already exists"]}')
    assert e.is_merge_request_conflict


def test_conflict_by_message():
    e = GitLabApiError(422, "Unprocessable Entity", "Merge request already exists for this branch")
    assert e.is_merge_request_conflict


def test_git_command_error_message_is_output():
    e = GitCommandError("fatal: not a git repository\n", ["git", "log"], 128)
    assert str(e) == "fatal: not a git repository\n"
    assert e.command == ["git", "log"]
    assert e.returncode == 128


def test_reconcile_error():
    e = MergeRequestReconcileError(2)
    assert e.count == 2
    assert str(e) == "unexpected: found more than 1 MR for branch"


def test_pipeline_lookup_error():
    assert str(PipelineLookupError()) == "unexpected: cannot get pipeline status"
