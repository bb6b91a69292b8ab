"""Link run engine: parsing, validation and the comment exchange."""

from asana_pr_link.engine.context import load_event_payload, read_trigger_context
from asana_pr_link.engine.extract import extract_task_gid, split_repository_name
from asana_pr_link.engine.runner import run_link
from asana_pr_link.engine.validation import validate_fields

__all__ = [
    "extract_task_gid",
    "load_event_payload",
    "read_trigger_context",
    "run_link",
    "split_repository_name",
    "validate_fields",
]
