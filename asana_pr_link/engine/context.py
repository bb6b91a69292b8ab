"""Trigger context extraction from GitHub ``pull_request`` events.

The runner writes the webhook payload that triggered the workflow to the
file named by ``GITHUB_EVENT_PATH``. Only four values are needed from it:

    pull_request.head.ref   -> branch_ref
    pull_request.html_url   -> pull_request_url
    pull_request.number     -> pull_request_number
    repository.full_name    -> repository_full_name
"""

import json
from pathlib import Path
from typing import Any

import structlog

from asana_pr_link.engine.validation import validate_fields
from asana_pr_link.exceptions import ConfigurationError
from asana_pr_link.models.domain import TriggerContext

log = structlog.get_logger(__name__)


def load_event_payload(event_path: Path | str) -> dict[str, Any]:
    """Read and decode the event payload file.

    Args:
        event_path: Path to the JSON payload

    Returns:
        Decoded payload object

    Raises:
        ConfigurationError: If the file is missing, unreadable, not JSON,
            or not a JSON object
    """
    path = Path(event_path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read event payload: {path}") from e

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in event payload {path}: {e}") from e

    if not isinstance(payload, dict):
        raise ConfigurationError("Event payload must be a JSON object")
    return payload


def _section(data: Any, key: str) -> dict[str, Any]:
    value = data.get(key) if isinstance(data, dict) else None
    return value if isinstance(value, dict) else {}


def read_trigger_context(payload: dict[str, Any]) -> TriggerContext:
    """Build a validated ``TriggerContext`` from an event payload.

    Absent nested objects are treated like absent values so that every
    missing field ends up in the same error.

    Raises:
        MissingFieldsError: If any of the four values is missing or empty
        ConfigurationError: If the pull request number is not an integer
    """
    pull_request = _section(payload, "pull_request")
    ref = _section(pull_request, "head").get("ref")
    pr_url = pull_request.get("html_url")
    issue_number = pull_request.get("number")
    full_name = _section(payload, "repository").get("full_name")

    log.info(
        "trigger_context_read",
        ref=ref,
        pr_url=pr_url,
        issue_number=issue_number,
        full_name=full_name,
    )

    validate_fields(
        [
            ("pr ref", ref),
            ("pr url", pr_url),
            ("issue number", issue_number),
            ("repo name", full_name),
        ]
    )

    if isinstance(issue_number, bool) or not isinstance(issue_number, int):
        raise ConfigurationError(f"Invalid issue number in event payload: {issue_number!r} (expected an integer)")

    return TriggerContext(
        branch_ref=ref,
        pull_request_url=pr_url,
        pull_request_number=issue_number,
        repository_full_name=full_name,
    )
