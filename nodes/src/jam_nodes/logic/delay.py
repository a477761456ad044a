"""Pause a workflow for a fixed duration."""

from __future__ import annotations

import asyncio
import time

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCategory, NodeResult, define_node

MAX_DELAY_MS = 300_000


class DelayInput(BaseModel):
    duration_ms: int = Field(ge=0, le=MAX_DELAY_MS, description="Milliseconds to wait (max 5 minutes)")
    reason: str | None = None


class DelayOutput(BaseModel):
    waited: bool
    actual_duration_ms: int


@define_node(
    type="delay",
    name="Delay",
    description="Wait for a duration before continuing",
    category=NodeCategory.LOGIC,
    input_schema=DelayInput,
    output_schema=DelayOutput,
    estimated_duration=1,
)
async def delay_node(input: DelayInput, context: ExecutionContext) -> NodeResult:
    try:
        start = time.monotonic()
        await asyncio.sleep(input.duration_ms / 1000)
        elapsed = int(round((time.monotonic() - start) * 1000))
        return NodeResult.ok(DelayOutput(waited=True, actual_duration_ms=elapsed))
    except Exception as e:
        return NodeResult.fail(str(e))
