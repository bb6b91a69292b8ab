"""Link run: Asana task <-> GitHub pull request.

Steps, strictly in order:

1. split ``owner/repo`` and derive the task gid from the branch ref
2. comment the PR URL on the Asana task
3. read the task permalink
4. comment the permalink on the pull request

Nothing is retried and nothing is rolled back; a comment already posted
to Asana stays there if a later step fails.
"""

import structlog

from asana_pr_link.engine.extract import extract_task_gid, split_repository_name
from asana_pr_link.engine.linker import add_pr_to_asana_task, comment_on_pull_request, get_asana_task_url
from asana_pr_link.engine.validation import validate_fields
from asana_pr_link.models.domain import LinkResult, TriggerContext
from asana_pr_link.providers.base import SourceControl, TaskTracker

log = structlog.get_logger(__name__)


async def run_link(
    context: TriggerContext,
    asana: TaskTracker,
    github: SourceControl,
) -> LinkResult:
    """Link the pull request in ``context`` to its Asana task.

    Args:
        context: Validated trigger context
        asana: Issue-tracker client
        github: Source-control client

    Returns:
        The published outputs and the gid that was linked

    Raises:
        MalformedReferenceError: Bad branch ref or repository name
        MissingFieldsError: The branch ref ends in ``/``
        TaskNotFoundError: Asana has no task for the gid
        MissingPermalinkError: The task has no permalink
    """
    repository = split_repository_name(context.repository_full_name)
    gid = extract_task_gid(context.branch_ref)
    validate_fields([("task gid", gid)])

    structlog.contextvars.bind_contextvars(gid=gid, pr=context.pull_request_number)
    try:
        log.info("link_started", repo=repository.full_name, ref=context.branch_ref)

        await add_pr_to_asana_task(gid, context.pull_request_url, asana)
        asana_task_url = await get_asana_task_url(gid, asana)
        await comment_on_pull_request(asana_task_url, repository, context.pull_request_number, github)

        log.info("link_completed", asana_task_url=asana_task_url)
    finally:
        structlog.contextvars.unbind_contextvars("gid", "pr")

    return LinkResult(
        pr_url=context.pull_request_url,
        asana_task_url=asana_task_url,
        task_gid=gid,
    )
