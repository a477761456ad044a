"""
DataForSEO service - keyword research and on-page audits.

Used by: seo_keyword_research, seo_audit

API Reference: https://docs.dataforseo.com/v3/
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any

import httpx

from jam_core.http import RetryPolicy
from jam_nodes.services.base import ApiService, ServiceError, require_field

DATAFORSEO_API_BASE = "https://api.dataforseo.com/v3"
TASK_OK = 20000


class DataForSeoService(ApiService):
    name = "dataforseo"
    display_name = "DataForSEO"
    base_url = DATAFORSEO_API_BASE
    policy = RetryPolicy(max_retries=3, backoff_ms=1000, timeout_ms=60_000)

    def __init__(self, login: str, password: str, client: httpx.AsyncClient | None = None):
        super().__init__(client)
        self._login = login
        self._password = password

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, str]) -> DataForSeoService:
        return cls(require_field(credentials, "login"), require_field(credentials, "password"))

    @property
    def _headers(self) -> dict[str, str]:
        token = base64.b64encode(f"{self._login}:{self._password}".encode()).decode()
        return {"Authorization": f"Basic {token}", "Content-Type": "application/json"}

    async def _task_result(self, path: str, payload: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """POST a single task and return its result list, raising on task errors."""
        data = await self._request("POST", path, json=payload)
        tasks = data.get("tasks") or []
        if not tasks:
            raise ServiceError(self.name, "DataForSEO returned no tasks")
        task = tasks[0]
        if task.get("status_code") != TASK_OK:
            raise ServiceError(
                self.name,
                f"DataForSEO task error: {task.get('status_code')} - {task.get('status_message')}",
            )
        return task.get("result") or []

    async def keyword_ideas(
        self,
        keywords: list[str],
        *,
        location_code: int,
        language_code: str,
        limit: int,
    ) -> list[dict[str, Any]]:
        result = await self._task_result(
            "/dataforseo_labs/google/keyword_ideas/live",
            [
                {
                    "keywords": keywords,
                    "location_code": location_code,
                    "language_code": language_code,
                    "limit": limit,
                }
            ],
        )
        return (result[0].get("items") or []) if result else []

    async def instant_page_audit(self, url: str, *, enable_javascript: bool = False) -> dict[str, Any] | None:
        result = await self._task_result(
            "/on_page/instant_pages",
            [{"url": url, "enable_javascript": enable_javascript}],
        )
        items = (result[0].get("items") or []) if result else []
        return items[0] if items else None
