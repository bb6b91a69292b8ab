"""CLI entry point for asana-pr-link."""

import asyncio
import sys
from pathlib import Path

import click
import structlog

from asana_pr_link.actions import set_failed, set_output
from asana_pr_link.config.settings import LinkSettings
from asana_pr_link.engine.context import load_event_payload, read_trigger_context
from asana_pr_link.engine.extract import extract_task_gid
from asana_pr_link.engine.runner import run_link
from asana_pr_link.exceptions import AsanaPrLinkError, ConfigurationError
from asana_pr_link.models.domain import LinkResult
from asana_pr_link.providers.factory import create_asana_provider, create_github_provider
from asana_pr_link.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Logging level",
)
def cli(log_level: str) -> None:
    """asana-pr-link: link GitHub pull requests to Asana tasks."""
    configure_logging(log_level)


@cli.command()
@click.option(
    "--event-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Event payload JSON (defaults to $GITHUB_EVENT_PATH)",
)
def link(event_path: Path | None) -> None:
    """Cross-link the triggering pull request and its Asana task.

    The task gid is the last segment of the PR's branch name, so a branch
    named ``feature/1204567890123456`` links to task 1204567890123456.

    Outputs ``pr_url`` and ``asana_task_url`` are only written once every
    step has succeeded.
    """
    try:
        settings = LinkSettings.load()
        result = asyncio.run(_link(settings, event_path or settings.github_event_path))
        for name, value in result.outputs().items():
            set_output(name, value, settings.github_output)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except AsanaPrLinkError as e:
        log.debug("link_failed", exc_info=True)
        set_failed(e.message)
        sys.exit(1)
    except Exception as e:
        log.error("link_failed_unexpected", exc_info=True)
        set_failed(str(e) or type(e).__name__)
        sys.exit(1)


@cli.command(name="extract-gid")
@click.argument("ref")
def extract_gid(ref: str) -> None:
    """Print the Asana task gid encoded in branch REF."""
    try:
        click.echo(extract_task_gid(ref))
    except AsanaPrLinkError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


async def _link(settings: LinkSettings, event_path: Path | None) -> LinkResult:
    """Build both clients, read the trigger context and run the link."""
    asana = create_asana_provider(settings)
    github = create_github_provider(settings)

    if event_path is None:
        raise ConfigurationError("No event payload: set GITHUB_EVENT_PATH or pass --event-path")
    context = read_trigger_context(load_event_payload(event_path))

    async with asana, github:
        return await run_link(context, asana, github)


if __name__ == "__main__":
    cli()
