"""Cross-referencing comments between an Asana task and a pull request.

Each function is a single step of the link run and takes its client as an
argument. Errors from the clients are not caught here.
"""

import structlog

from asana_pr_link.exceptions import MissingPermalinkError, TaskNotFoundError
from asana_pr_link.models.domain import RepositoryRef, Task
from asana_pr_link.providers.base import SourceControl, TaskTracker

log = structlog.get_logger(__name__)

PR_COMMENT_TEMPLATE = "GitHub PR: {pr_url}"
TASK_COMMENT_TEMPLATE = "Asana Task: {task_url}"


async def get_asana_task(gid: str, client: TaskTracker) -> Task:
    """Fetch a task, failing if Asana has none for ``gid``.

    Raises:
        TaskNotFoundError: If the tracker returns no task
    """
    task = await client.get_task(gid)
    if not task:
        raise TaskNotFoundError(gid)
    return task


async def get_asana_task_url(gid: str, client: TaskTracker) -> str:
    """Fetch the task again and return its permalink.

    Raises:
        TaskNotFoundError: If the tracker returns no task
        MissingPermalinkError: If the task has no permalink
    """
    task = await get_asana_task(gid, client)
    if not task.permalink_url:
        raise MissingPermalinkError(gid)
    return task.permalink_url


async def add_pr_to_asana_task(gid: str, pr_url: str, client: TaskTracker) -> None:
    """Comment ``GitHub PR: <pr_url>`` on the task.

    The task is looked up first so an unknown gid fails before anything is
    written.
    """
    await get_asana_task(gid, client)
    await client.create_comment_on_task(gid, PR_COMMENT_TEMPLATE.format(pr_url=pr_url))
    log.info("asana_comment_posted", gid=gid, pr_url=pr_url)


async def comment_on_pull_request(
    asana_task_url: str,
    repository: RepositoryRef,
    issue_number: int,
    client: SourceControl,
) -> None:
    """Comment ``Asana Task: <asana_task_url>`` on the pull request."""
    await client.create_issue_comment(
        owner=repository.owner,
        repo=repository.repo,
        issue_number=issue_number,
        body=TASK_COMMENT_TEMPLATE.format(task_url=asana_task_url),
    )
    log.info(
        "github_comment_posted",
        repo=repository.full_name,
        number=issue_number,
        asana_task_url=asana_task_url,
    )
