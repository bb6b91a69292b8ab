"""Domain models for asana-pr-link."""

from asana_pr_link.models.domain import LinkResult, RepositoryRef, Task, TriggerContext

__all__ = [
    "LinkResult",
    "RepositoryRef",
    "Task",
    "TriggerContext",
]
