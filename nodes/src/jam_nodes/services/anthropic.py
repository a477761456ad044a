"""
Anthropic service - text generation with Claude via the Messages API.

Used by: social_keyword_generator, draft_emails, social_ai_analyze
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from jam_core.http import RetryPolicy
from jam_nodes.services.base import ApiService, require_field

ANTHROPIC_API_BASE = "https://api.anthropic.com/v1"
ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_MODEL = "claude-sonnet-4-20250514"


class AnthropicService(ApiService):
    name = "anthropic"
    display_name = "Anthropic"
    base_url = ANTHROPIC_API_BASE
    policy = RetryPolicy(max_retries=3, backoff_ms=1000, timeout_ms=60_000)

    def __init__(self, api_key: str, client: httpx.AsyncClient | None = None):
        super().__init__(client)
        self._api_key = api_key

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, str]) -> AnthropicService:
        return cls(require_field(credentials, "api_key"))

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self._api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }

    async def generate_text(
        self,
        prompt: str,
        *,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 2000,
        timeout_ms: int | None = None,
    ) -> str:
        """Send a single user message and return the first text block ('' if none)."""
        policy = RetryPolicy(timeout_ms=timeout_ms) if timeout_ms else None
        data = await self._request(
            "POST",
            "/messages",
            policy=policy,
            json={
                "model": model,
                "max_tokens": max_tokens,
                "messages": [{"role": "user", "content": prompt}],
            },
        )
        for block in data.get("content") or []:
            if block.get("type") == "text":
                return block.get("text") or ""
        return ""
