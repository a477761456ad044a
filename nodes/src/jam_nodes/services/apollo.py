"""
Apollo.io service - people search and enrichment.

Used by: search_contacts

API Reference: https://apolloio.github.io/apollo-api-docs/
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from jam_nodes.services.base import ApiService, require_field

APOLLO_API_BASE = "https://api.apollo.io/api/v1"


class ApolloService(ApiService):
    """Handle wrapping Apollo.io API calls."""

    name = "apollo"
    display_name = "Apollo"
    base_url = APOLLO_API_BASE

    def __init__(self, api_key: str, client: httpx.AsyncClient | None = None):
        super().__init__(client)
        self._api_key = api_key

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, str]) -> ApolloService:
        return cls(require_field(credentials, "api_key"))

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Cache-Control": "no-cache",
            "X-Api-Key": self._api_key,
        }

    async def search_people(self, body: dict[str, Any]) -> list[dict[str, Any]]:
        """Search people; returns only those Apollo reports as having an email."""
        data = await self._request("POST", "/mixed_people/api_search", json=body)
        people = data.get("people") or []
        return [person for person in people if person.get("has_email") is True]

    async def enrich_person(self, person_id: str) -> dict[str, Any] | None:
        """Reveal a person's email by Apollo id. Returns None when no match."""
        data = await self._request(
            "POST",
            "/people/match",
            json={"id": person_id, "reveal_personal_emails": True},
        )
        return data.get("person") or None
