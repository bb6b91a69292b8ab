"""GitHub provider implementation using PyGithub."""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from github import Auth, Github, GithubException  # type: ignore[import-not-found]

from asana_pr_link.providers.base import SourceControl

log = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_GITHUB_API_URL = "https://api.github.com"


async def _run_sync(func: Callable[[], T]) -> T:
    """Run a synchronous function in a thread pool.

    This prevents blocking the event loop when calling synchronous
    PyGithub methods.
    """
    return await asyncio.to_thread(func)


class GitHubRestProvider(SourceControl):
    """GitHub implementation using PyGithub library."""

    def __init__(self, token: str, base_url: str = DEFAULT_GITHUB_API_URL):
        """Initialize GitHub provider.

        Args:
            token: GitHub token (``GITHUB_TOKEN`` or a personal access token)
            base_url: GitHub API base URL (for GitHub Enterprise)
        """
        self.token = token.strip() if token else token
        self.base_url = base_url.rstrip("/")
        self._client: Github | None = None

    async def connect(self) -> None:
        """Initialize GitHub client."""
        if self._client is not None:
            return
        self._client = Github(auth=Auth.Token(self.token), base_url=self.base_url)
        log.info("github_connected", base_url=self.base_url)

    async def disconnect(self) -> None:
        """Close GitHub client."""
        if self._client:
            await _run_sync(self._client.close)
            self._client = None

    async def create_issue_comment(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        body: str,
    ) -> None:
        """Comment on an issue or pull request."""
        log.info("create_issue_comment", repo=f"{owner}/{repo}", number=issue_number)

        if self._client is None:
            raise ConnectionError("GitHub provider is not connected")
        client = self._client

        def _create_comment() -> dict[str, Any]:
            # POST only, no repository or issue lookup.
            _, data = client.requester.requestJsonAndCheck(
                "POST",
                f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
                input={"body": body},
            )
            return data

        try:
            data = await _run_sync(_create_comment)
        except GithubException as e:
            log.error("github_create_comment_failed", number=issue_number, error=str(e))
            raise

        log.info("github_comment_created", number=issue_number, comment_id=(data or {}).get("id"))
