"""Factory for creating provider instances from settings."""

import structlog

from asana_pr_link.config.settings import LinkSettings
from asana_pr_link.providers.asana_rest import AsanaRestProvider
from asana_pr_link.providers.github_rest import GitHubRestProvider

log = structlog.get_logger(__name__)


def create_asana_provider(settings: LinkSettings) -> AsanaRestProvider:
    """Create the Asana client from settings.

    Example:
        >>> settings = LinkSettings.load()
        >>> async with create_asana_provider(settings) as asana:
        ...     task = await asana.get_task("1204567890123456")
    """
    log.info("creating_asana_provider", base_url=settings.asana_base_url)
    return AsanaRestProvider(
        token=settings.asana_token.get_secret_value(),
        base_url=settings.asana_base_url,
        timeout=settings.request_timeout,
    )


def create_github_provider(settings: LinkSettings) -> GitHubRestProvider:
    """Create the GitHub client from settings."""
    log.info("creating_github_provider", base_url=settings.github_api_url)
    return GitHubRestProvider(
        token=settings.github_token.get_secret_value(),
        base_url=settings.github_api_url,
    )
