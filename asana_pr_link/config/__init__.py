"""Configuration for asana-pr-link."""

from asana_pr_link.config.settings import LinkSettings

__all__ = ["LinkSettings"]
