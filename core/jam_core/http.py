"""
Resilient fetch - an HTTP call wrapped with timeout, retry and backoff.

Every integration node reaches the network through fetch_with_retry():

    response = await fetch_with_retry(
        f"{APOLLO_API_BASE}/people/match",
        method="POST",
        headers=headers,
        json=body,
        policy=RetryPolicy(timeout_ms=30_000),
    )
    data = parse_json_response(response, "Apollo")

Retry rules:
- Each attempt, body included, is bounded by timeout_ms.
- Timeouts and transport errors are retried.
- 5xx and 429 responses are retried.
- Any other non-2xx response is returned immediately (ok is False).
- A constant backoff is awaited before every retry.
- When attempts run out, FetchRetryError is raised.
"""

from __future__ import annotations

import asyncio
import json as jsonlib
import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = 429


@dataclass(frozen=True)
class RetryPolicy:
    """Retry configuration for a single call site."""

    max_retries: int = 3
    backoff_ms: int = 1000
    timeout_ms: int = 30_000

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.backoff_ms < 0:
            raise ValueError(f"backoff_ms must be >= 0, got {self.backoff_ms}")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be > 0, got {self.timeout_ms}")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1


class FetchRetryError(Exception):
    """Raised when every attempt of fetch_with_retry failed."""

    def __init__(
        self,
        url: str,
        attempts: int,
        message: str,
        status: int | None = None,
    ):
        self.url = url
        self.attempts = attempts
        self.status = status
        self.message = message
        super().__init__(f"Request to {url} failed after {attempts} attempt(s): {message}")


class HttpStatusError(Exception):
    """Raised when a service answers with a non-2xx status."""

    def __init__(self, service: str, status: int, body: str):
        self.service = service
        self.status = status
        self.body = body
        super().__init__(f"{service} API error: {status} - {body}")


class FetchResponse:
    """Buffered HTTP response returned by fetch_with_retry."""

    def __init__(self, status: int, headers: dict[str, str], body: bytes, url: str = ""):
        self.status = status
        self.headers = headers
        self.url = url
        self._body = body

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> FetchResponse:
        return cls(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
            url=str(response.request.url) if response.request else "",
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content(self) -> bytes:
        return self._body

    def text(self) -> str:
        return self._body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return jsonlib.loads(self._body)

    def __repr__(self) -> str:
        return f"FetchResponse(status={self.status}, url={self.url!r})"


def _is_retryable_status(status: int) -> bool:
    return status >= 500 or status == RETRYABLE_STATUS


async def fetch_with_retry(
    url: str,
    *,
    method: str = "GET",
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    json: Any = None,
    data: Any = None,
    files: Any = None,
    content: bytes | str | None = None,
    policy: RetryPolicy | None = None,
    client: httpx.AsyncClient | None = None,
) -> FetchResponse:
    """
    Perform an HTTP request with per-attempt timeout, retries and constant backoff.

    Args:
        url: Absolute request URL
        method: HTTP method
        headers: Request headers
        params: Query string parameters
        json: JSON-serializable request body
        data: Form fields
        files: Multipart files
        content: Raw request body
        policy: Retry configuration (defaults to RetryPolicy())
        client: Optional shared AsyncClient; a short-lived one is created otherwise

    Returns:
        FetchResponse for the first 2xx answer, or for the first non-retryable
        non-2xx answer.

    Raises:
        FetchRetryError: When all attempts failed with retryable errors.
    """
    policy = policy or RetryPolicy()
    timeout = httpx.Timeout(policy.timeout_ms / 1000)
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient()

    last_message = ""
    last_status: int | None = None

    try:
        for attempt in range(1, policy.max_attempts + 1):
            if attempt > 1:
                logger.warning(
                    f"Retrying {method} {url} (attempt {attempt}/{policy.max_attempts})",
                    extra={"event": "fetch_retry", "attempt": attempt},
                )
                await asyncio.sleep(policy.backoff_ms / 1000)

            try:
                async with asyncio.timeout(policy.timeout_ms / 1000):
                    response = await client.request(
                        method,
                        url,
                        headers=headers,
                        params=params,
                        json=json,
                        data=data,
                        files=files,
                        content=content,
                        timeout=timeout,
                    )
            except (httpx.TimeoutException, TimeoutError):
                last_message = f"Request timeout after {policy.timeout_ms}ms"
                last_status = None
                logger.debug(f"{method} {url} timed out", extra={"attempt": attempt})
                continue
            except httpx.TransportError as e:
                last_message = str(e) or type(e).__name__
                last_status = None
                logger.debug(f"{method} {url} transport error: {last_message}")
                continue

            logger.debug(
                f"{method} {url} -> {response.status_code}",
                extra={"attempt": attempt, "status": response.status_code},
            )
            if _is_retryable_status(response.status_code):
                last_status = response.status_code
                last_message = f"HTTP {response.status_code}: {response.text[:200]}"
                continue

            return FetchResponse.from_httpx(response)
    finally:
        if owns_client:
            await client.aclose()

    raise FetchRetryError(url, policy.max_attempts, last_message, status=last_status)


def parse_json_response(response: FetchResponse, service: str) -> Any:
    """Return the decoded JSON body, raising HttpStatusError on a non-2xx status."""
    if not response.ok:
        raise HttpStatusError(service, response.status, response.text())
    return response.json()
