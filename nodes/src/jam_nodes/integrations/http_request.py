"""Generic HTTP request node."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCategory, NodeResult, define_node
from jam_core.http import FetchResponse, RetryPolicy, fetch_with_retry

logger = logging.getLogger(__name__)


class HttpRequestInput(BaseModel):
    url: str
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"] = "GET"
    headers: dict[str, str] | None = None
    query: dict[str, str] | None = Field(None, description="Query string parameters")
    body: Any = None
    timeout_ms: int = Field(30_000, ge=1, le=300_000)
    max_retries: int = Field(3, ge=0, le=10)


class HttpRequestOutput(BaseModel):
    status: int
    ok: bool
    headers: dict[str, str]
    data: Any = None


def _decode_body(response: FetchResponse) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text()


@define_node(
    type="http_request",
    name="HTTP Request",
    description="Make an HTTP request to any URL",
    category=NodeCategory.INTEGRATION,
    input_schema=HttpRequestInput,
    output_schema=HttpRequestOutput,
    estimated_duration=2,
)
async def http_request_node(input: HttpRequestInput, context: ExecutionContext) -> NodeResult:
    try:
        kwargs: dict[str, Any] = {}
        if isinstance(input.body, (str, bytes)):
            kwargs["content"] = input.body
        elif input.body is not None:
            kwargs["json"] = input.body

        response = await fetch_with_retry(
            input.url,
            method=input.method,
            headers=input.headers,
            params=input.query,
            policy=RetryPolicy(max_retries=input.max_retries, timeout_ms=input.timeout_ms),
            **kwargs,
        )
        logger.info(f"{input.method} {input.url} -> {response.status}", extra={"status": response.status})

        return NodeResult.ok(
            HttpRequestOutput(
                status=response.status,
                ok=response.ok,
                headers=dict(response.headers),
                data=_decode_body(response),
            )
        )
    except Exception as e:
        return NodeResult.fail(str(e))
