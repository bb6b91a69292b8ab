"""
Domain models for the link run.

Everything here is transient and request-scoped: a ``TriggerContext`` is
built once from the CI event payload, a ``Task`` is read from Asana, and a
``LinkResult`` is handed back to the CLI for publishing. Nothing is
persisted between runs.

Example:
    Building a context by hand::

        context = TriggerContext(
            branch_ref="feature/1204567890123456",
            pull_request_url="https://github.com/org/repo/pull/7",
            pull_request_number=7,
            repository_full_name="org/repo",
        )
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TriggerContext:
    """Values taken from a ``pull_request`` event payload.

    All four fields are required; the context reader rejects a payload in
    which any of them is empty.
    """

    branch_ref: str
    """Source branch of the pull request (``pull_request.head.ref``).

    The Asana task gid is the final ``/``-separated segment.
    """

    pull_request_url: str
    """Browser URL of the pull request (``pull_request.html_url``)."""

    pull_request_number: int
    """Pull request number, also its issue number for comments."""

    repository_full_name: str
    """Repository in ``owner/repo`` form (``repository.full_name``)."""


@dataclass(frozen=True)
class RepositoryRef:
    """Owner and name of a GitHub repository."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class Task:
    """An Asana task as seen by this tool.

    Only the fields needed for linking are fetched; the task itself is
    owned by Asana and never created or deleted here.
    """

    gid: str
    name: str | None = None
    permalink_url: str | None = None


@dataclass(frozen=True)
class LinkResult:
    """Outcome of a successful link run."""

    pr_url: str
    asana_task_url: str
    task_gid: str

    def outputs(self) -> dict[str, str]:
        """Step outputs in publishing order."""
        return {"pr_url": self.pr_url, "asana_task_url": self.asana_task_url}
