"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
import structlog

from asana_pr_link.models.domain import Task, TriggerContext
from asana_pr_link.providers.base import SourceControl, TaskTracker


class FakeAsana(TaskTracker):
    """In-memory task tracker recording every call."""

    def __init__(self, tasks: dict[str, Task] | None = None):
        self.tasks = tasks or {}
        self.comments: list[tuple[str, str]] = []
        self.get_calls: list[str] = []

    async def get_task(self, gid: str) -> Task | None:
        self.get_calls.append(gid)
        return self.tasks.get(gid)

    async def create_comment_on_task(self, gid: str, text: str) -> None:
        self.comments.append((gid, text))


class FakeGitHub(SourceControl):
    """In-memory source-control client recording every comment."""

    def __init__(self):
        self.comments: list[dict] = []

    async def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        self.comments.append({"owner": owner, "repo": repo, "issue_number": issue_number, "body": body})


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop any logging configuration a CLI test installed."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def sample_task() -> Task:
    """Asana task 42 with a permalink."""
    return Task(gid="42", name="Ship the widget", permalink_url="https://app.asana.com/0/42")


@pytest.fixture
def fake_asana(sample_task: Task) -> FakeAsana:
    return FakeAsana({sample_task.gid: sample_task})


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def trigger_context() -> TriggerContext:
    return TriggerContext(
        branch_ref="feature/42",
        pull_request_url="https://github.com/o/r/pull/7",
        pull_request_number=7,
        repository_full_name="o/r",
    )


@pytest.fixture
def event_payload() -> dict:
    """Minimal ``pull_request`` event payload."""
    return {
        "action": "opened",
        "pull_request": {
            "number": 7,
            "html_url": "https://github.com/o/r/pull/7",
            "head": {"ref": "feature/42", "sha": "abc123"},
        },
        "repository": {"full_name": "o/r", "name": "r", "owner": {"login": "o"}},
    }


@pytest.fixture
def event_file(tmp_path: Path, event_payload: dict) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(event_payload))
    return path
