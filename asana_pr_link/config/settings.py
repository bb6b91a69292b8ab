"""
Configuration using Pydantic settings.

All configuration comes from the environment of the CI step. The two
secrets can be supplied either as plain variables (``ASANA_TOKEN``,
``GITHUB_TOKEN``) or as action inputs, which the runner exposes as
``INPUT_ASANA-TOKEN`` and ``INPUT_GITHUB-TOKEN``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from asana_pr_link.exceptions import ConfigurationError
from asana_pr_link.providers.asana_rest import DEFAULT_ASANA_BASE_URL
from asana_pr_link.providers.github_rest import DEFAULT_GITHUB_API_URL


class LinkSettings(BaseSettings):
    """Settings for a single link run."""

    model_config = SettingsConfigDict(
        env_prefix="ASANA_PR_LINK_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    asana_token: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("INPUT_ASANA-TOKEN", "ASANA_TOKEN"),
        description="Asana personal access token",
    )
    github_token: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("INPUT_GITHUB-TOKEN", "GITHUB_TOKEN"),
        description="GitHub token used to comment on the pull request",
    )
    asana_base_url: str = Field(default=DEFAULT_ASANA_BASE_URL, description="Asana API base URL")
    github_api_url: str = Field(
        default=DEFAULT_GITHUB_API_URL,
        validation_alias=AliasChoices("GITHUB_API_URL", "ASANA_PR_LINK_GITHUB_API_URL"),
        description="GitHub API base URL (set by the runner on GitHub Enterprise)",
    )
    github_event_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_EVENT_PATH"),
        description="Path to the triggering event payload",
    )
    github_output: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_OUTPUT"),
        description="File that collects step outputs",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds for Asana calls")

    @field_validator("asana_token", "github_token")
    @classmethod
    def _reject_blank_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("token must not be blank")
        return value

    @classmethod
    def load(cls, **overrides: object) -> LinkSettings:
        """Read settings from the environment.

        Args:
            **overrides: Values that take precedence over the environment

        Raises:
            ConfigurationError: If a required value is missing or invalid
        """
        try:
            return cls(**overrides)
        except ValidationError as e:
            problems = ", ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {problems}") from e
