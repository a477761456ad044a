"""
Social search services.

- TwitterApiService: twitterapi.io advanced search (twitter_monitor)
- ForumScoutService: LinkedIn and Reddit search (linkedin_monitor, reddit_monitor)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from jam_core.http import RetryPolicy
from jam_nodes.services.base import ApiService, require_field

TWITTERAPI_BASE_URL = "https://api.twitterapi.io"
FORUMSCOUT_BASE_URL = "https://forumscout.app/api"


class TwitterApiService(ApiService):
    name = "twitter"
    display_name = "Twitter"
    base_url = TWITTERAPI_BASE_URL

    def __init__(self, api_key: str, client: httpx.AsyncClient | None = None):
        super().__init__(client)
        self._api_key = api_key

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, str]) -> TwitterApiService:
        return cls(require_field(credentials, "api_key"))

    @property
    def _headers(self) -> dict[str, str]:
        return {"X-API-Key": self._api_key}

    async def search(self, query: str, query_type: str = "Latest") -> dict[str, Any]:
        """Run an advanced search; returns {tweets, has_next_page, next_cursor}."""
        return await self._request(
            "GET",
            "/twitter/tweet/advanced_search",
            params={"query": query, "queryType": query_type},
        )


class ForumScoutService(ApiService):
    name = "forumscout"
    display_name = "ForumScout"
    base_url = FORUMSCOUT_BASE_URL
    policy = RetryPolicy(max_retries=3, backoff_ms=1000, timeout_ms=60_000)

    def __init__(self, api_key: str, client: httpx.AsyncClient | None = None):
        super().__init__(client)
        self._api_key = api_key

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, str]) -> ForumScoutService:
        return cls(require_field(credentials, "api_key"))

    @property
    def _headers(self) -> dict[str, str]:
        return {"X-API-Key": self._api_key, "Content-Type": "application/json"}

    @staticmethod
    def _unwrap_posts(data: Any) -> list[dict[str, Any]]:
        # Responses are either a bare list or wrapped under posts/results/data
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in ("posts", "results", "data"):
                if isinstance(data.get(key), list):
                    return data[key]
        return []

    async def search_linkedin(
        self, keyword: str, *, sort_by: str = "date_posted", page: int | None = None
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"keyword": keyword, "sort_by": sort_by}
        if page:
            params["page"] = page
        return self._unwrap_posts(await self._request("GET", "/linkedin_search", params=params))

    async def search_reddit(
        self, keyword: str, *, sort_by: str = "new", time_filter: str | None = None
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"keyword": keyword, "sort_by": sort_by}
        if time_filter:
            params["time"] = time_filter
        return self._unwrap_posts(await self._request("GET", "/reddit_search", params=params))
