"""Shared plumbing for credential-backed API service handles."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jam_core.http import FetchResponse, RetryPolicy, fetch_with_retry

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Raised when a service call fails with a known, user-facing reason."""

    def __init__(self, service: str, message: str, status: int | None = None):
        self.service = service
        self.status = status
        super().__init__(message)


class ApiService:
    """
    Base class for service handles.

    Subclasses set ``name``, ``display_name``, ``base_url`` and implement
    ``_headers``. Calls go through fetch_with_retry and are decoded by
    ``_handle_response``.
    """

    name = ""
    display_name = ""
    base_url = ""
    policy = RetryPolicy(max_retries=3, backoff_ms=1000, timeout_ms=30_000)

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client

    @property
    def _headers(self) -> dict[str, str]:
        return {}

    def _handle_response(self, response: FetchResponse) -> Any:
        """Map common HTTP error codes to ServiceError, else decode JSON."""
        if response.status == 401:
            raise ServiceError(self.name, f"Invalid {self.display_name} API key", 401)
        if response.status == 403:
            raise ServiceError(
                self.name,
                f"Insufficient credits or permissions. Check your {self.display_name} plan.",
                403,
            )
        if not response.ok:
            raise ServiceError(
                self.name,
                f"{self.display_name} API error: {response.status} - {response.text()}",
                response.status,
            )
        try:
            return response.json()
        except ValueError as e:
            raise ServiceError(
                self.name, f"{self.display_name} returned invalid JSON: {e}", response.status
            ) from e

    async def _request(
        self,
        method: str,
        path: str,
        *,
        policy: RetryPolicy | None = None,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> Any:
        url = path if path.startswith("http") else f"{self.base_url}{path}"
        logger.debug(f"{self.display_name} {method} {url}", extra={"service": self.name})
        response = await fetch_with_retry(
            url,
            method=method,
            headers={**self._headers, **(headers or {})},
            policy=policy or self.policy,
            client=self._client,
            **kwargs,
        )
        return self._handle_response(response)


def require_field(credentials: dict[str, str] | Any, name: str) -> str:
    """Return a credential field, raising KeyError when it is missing or empty."""
    value = credentials.get(name)
    if not value:
        raise KeyError(name)
    return value
