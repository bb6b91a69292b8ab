"""Issue-tracker and source-control providers."""

from asana_pr_link.providers.asana_rest import AsanaRestProvider
from asana_pr_link.providers.base import SourceControl, TaskTracker
from asana_pr_link.providers.github_rest import GitHubRestProvider

__all__ = [
    "AsanaRestProvider",
    "GitHubRestProvider",
    "SourceControl",
    "TaskTracker",
]
