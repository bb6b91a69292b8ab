"""Tests for asana_pr_link.config.settings."""

from pathlib import Path

import pytest

from asana_pr_link.config.settings import LinkSettings
from asana_pr_link.exceptions import ConfigurationError

ENV_VARS = [
    "ASANA_TOKEN",
    "INPUT_ASANA-TOKEN",
    "GITHUB_TOKEN",
    "INPUT_GITHUB-TOKEN",
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
    "GITHUB_OUTPUT",
    "ASANA_PR_LINK_ASANA_BASE_URL",
    "ASANA_PR_LINK_REQUEST_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any CI variables inherited from the test runner."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLinkSettings:
    def test_reads_plain_env_vars(self, clean_env):
        clean_env.setenv("ASANA_TOKEN", "asana-secret")
        clean_env.setenv("GITHUB_TOKEN", "gh-secret")

        settings = LinkSettings.load()

        assert settings.asana_token.get_secret_value() == "asana-secret"
        assert settings.github_token.get_secret_value() == "gh-secret"
        assert settings.asana_base_url == "https://app.asana.com/api/1.0"
        assert settings.github_api_url == "https://api.github.com"
        assert settings.github_event_path is None
        assert settings.github_output is None
        assert settings.request_timeout == 30.0

    def test_reads_action_inputs(self, clean_env):
        clean_env.setenv("INPUT_ASANA-TOKEN", "from-input")
        clean_env.setenv("INPUT_GITHUB-TOKEN", "gh-input")

        settings = LinkSettings.load()

        assert settings.asana_token.get_secret_value() == "from-input"
        assert settings.github_token.get_secret_value() == "gh-input"

    def test_reads_runner_paths(self, clean_env, tmp_path):
        clean_env.setenv("ASANA_TOKEN", "a")
        clean_env.setenv("GITHUB_TOKEN", "g")
        clean_env.setenv("GITHUB_EVENT_PATH", str(tmp_path / "event.json"))
        clean_env.setenv("GITHUB_OUTPUT", str(tmp_path / "output"))
        clean_env.setenv("GITHUB_API_URL", "https://github.example.com/api/v3")
        clean_env.setenv("ASANA_PR_LINK_REQUEST_TIMEOUT", "5")

        settings = LinkSettings.load()

        assert settings.github_event_path == Path(tmp_path / "event.json")
        assert settings.github_output == Path(tmp_path / "output")
        assert settings.github_api_url == "https://github.example.com/api/v3"
        assert settings.request_timeout == 5.0

    def test_secrets_hidden_in_repr(self, clean_env):
        settings = LinkSettings.load(asana_token="asana-secret", github_token="gh-secret")

        assert "asana-secret" not in repr(settings)
        assert "gh-secret" not in repr(settings)

    def test_missing_tokens(self, clean_env):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            LinkSettings.load()

    def test_blank_token_rejected(self, clean_env):
        clean_env.setenv("ASANA_TOKEN", "   ")
        clean_env.setenv("GITHUB_TOKEN", "g")

        with pytest.raises(ConfigurationError, match="token must not be blank"):
            LinkSettings.load()

    def test_non_positive_timeout_rejected(self, clean_env):
        with pytest.raises(ConfigurationError):
            LinkSettings.load(asana_token="a", github_token="g", request_timeout=0)
