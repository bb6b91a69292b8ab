"""GitHub Actions step I/O: outputs and failure reporting.

Outputs are appended to the file named by ``GITHUB_OUTPUT`` using the
multi-line ``name<<delimiter`` form. Failures are reported with the
``::error::`` workflow command on stdout.
"""

import uuid
from pathlib import Path

import click
import structlog

log = structlog.get_logger(__name__)


def escape_command_data(value: str) -> str:
    """Escape a value for use as workflow command data."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _output_delimiter(name: str, value: str) -> str:
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: output '{name}' contains the delimiter {delimiter}")
    return delimiter


def set_output(name: str, value: str, output_file: Path | None = None) -> None:
    """Publish a step output.

    Args:
        name: Output name, e.g. ``pr_url``
        value: Output value
        output_file: ``GITHUB_OUTPUT`` path; when None the pair is echoed
            as ``name=value`` for local runs
    """
    if output_file is None:
        click.echo(f"{name}={value}")
        return

    delimiter = _output_delimiter(name, value)
    with open(output_file, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    log.debug("output_set", name=name)


def set_failed(message: str) -> None:
    """Report the step as failed with ``message`` as the only diagnostic."""
    click.echo(f"::error::{escape_command_data(message)}")
