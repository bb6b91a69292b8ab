"""Asana provider implementation using direct REST API calls."""

from typing import Any

import httpx
import structlog

from asana_pr_link.models.domain import Task
from asana_pr_link.providers.base import TaskTracker

log = structlog.get_logger(__name__)

DEFAULT_ASANA_BASE_URL = "https://app.asana.com/api/1.0"
TASK_OPT_FIELDS = "name,permalink_url"


class AsanaRestProvider(TaskTracker):
    """Asana implementation using the REST API via httpx."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_ASANA_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Asana provider.

        Args:
            token: Asana personal access token
            base_url: Asana API base URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.token = token.strip() if token else token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/json",
            },
            timeout=self.timeout,
            transport=self._transport,
        )
        log.info("asana_connected", base_url=self.base_url)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise ConnectionError("Asana provider is not connected")
        return self._client

    async def get_task(self, gid: str) -> Task | None:
        """Fetch a task, returning None when Asana does not know it."""
        log.info("get_task", gid=gid)

        response = await self.client.get(f"/tasks/{gid}", params={"opt_fields": TASK_OPT_FIELDS})
        if response.status_code == 404:
            log.warning("asana_task_not_found", gid=gid)
            return None
        response.raise_for_status()

        data = response.json().get("data")
        if not data:
            return None
        return self._parse_task(data, gid)

    async def create_comment_on_task(self, gid: str, text: str) -> None:
        """Post a comment story on the task."""
        log.info("create_comment_on_task", gid=gid)

        response = await self.client.post(f"/tasks/{gid}/stories", json={"data": {"text": text}})
        response.raise_for_status()

    @staticmethod
    def _parse_task(data: dict[str, Any], gid: str) -> Task:
        return Task(
            gid=str(data.get("gid") or gid),
            name=data.get("name"),
            permalink_url=data.get("permalink_url"),
        )
