"""
OpenAI service - Sora video generation.

Used by: sora_video
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from jam_core.http import RetryPolicy
from jam_nodes.services.base import ApiService, require_field

OPENAI_API_BASE = "https://api.openai.com/v1"


class OpenAIService(ApiService):
    name = "openai"
    display_name = "OpenAI"
    base_url = OPENAI_API_BASE

    def __init__(self, api_key: str, client: httpx.AsyncClient | None = None):
        super().__init__(client)
        self._api_key = api_key

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, str]) -> OpenAIService:
        return cls(require_field(credentials, "api_key"))

    @property
    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    async def create_video(self, *, prompt: str, model: str, seconds: int, size: str) -> dict[str, Any]:
        """Start a video generation job (multipart form request)."""
        form = {
            "prompt": (None, prompt),
            "model": (None, model),
            "seconds": (None, str(seconds)),
            "size": (None, size),
        }
        return await self._request(
            "POST",
            "/videos",
            files=form,
            policy=RetryPolicy(timeout_ms=60_000),
        )

    async def get_video(self, video_id: str) -> dict[str, Any]:
        """Fetch the current status of a video job."""
        return await self._request("GET", f"/videos/{video_id}")
