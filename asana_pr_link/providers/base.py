"""
Abstract base classes for providers.

This module defines the two capabilities the link run needs from the
outside world: reading and commenting on issue-tracker tasks, and
commenting on source-control pull requests. The engine only talks to
these interfaces, so tests can substitute in-memory fakes.
"""

from abc import ABC, abstractmethod
from typing import Any

from asana_pr_link.models.domain import Task


class TaskTracker(ABC):
    """Abstract base class for issue-tracker implementations (Asana).

    All methods are async to support non-blocking I/O with HTTP clients.
    """

    async def connect(self) -> None:
        """Open any underlying connection. No-op by default."""

    async def disconnect(self) -> None:
        """Release any underlying connection. No-op by default."""

    async def __aenter__(self) -> "TaskTracker":
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.disconnect()

    @abstractmethod
    async def get_task(self, gid: str) -> Task | None:
        """Fetch a task by identifier.

        Args:
            gid: Task identifier

        Returns:
            The task, or None if the tracker has no task with this gid.

        Raises:
            httpx.HTTPStatusError: For any other API failure (auth, rate limit, ...).
        """
        pass

    @abstractmethod
    async def create_comment_on_task(self, gid: str, text: str) -> None:
        """Add a plain-text comment to a task.

        Args:
            gid: Task identifier
            text: Comment text

        Raises:
            httpx.HTTPStatusError: If the API request fails.
        """
        pass


class SourceControl(ABC):
    """Abstract base class for source-control platform implementations (GitHub)."""

    async def connect(self) -> None:
        """Open any underlying connection. No-op by default."""

    async def disconnect(self) -> None:
        """Release any underlying connection. No-op by default."""

    async def __aenter__(self) -> "SourceControl":
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.disconnect()

    @abstractmethod
    async def create_issue_comment(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        body: str,
    ) -> None:
        """Comment on an issue or pull request.

        GitHub treats pull requests as issues for commenting purposes, so
        ``issue_number`` is the pull request number.

        Raises:
            GithubException: If the API request fails.
        """
        pass
