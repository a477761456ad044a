"""OpenAI Sora video generation node."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Literal

from pydantic import BaseModel

from jam_core import ExecutionContext, NodeCapabilities, NodeCategory, NodeResult, define_node

logger = logging.getLogger(__name__)

POLL_INTERVAL_S = 5
MAX_WAIT_S = 300


class SoraVideoInput(BaseModel):
    prompt: str
    model: Literal["sora-2", "sora-2-pro"] = "sora-2"
    seconds: Literal[4, 8, 12] = 4
    size: Literal["720x1280", "1280x720", "1024x1792", "1792x1024"] = "1280x720"


class SoraVideo(BaseModel):
    url: str
    duration_seconds: int
    size: str
    model: str


class SoraVideoOutput(BaseModel):
    video: SoraVideo
    processing_time_seconds: int


async def wait_for_video(
    openai: Any,
    video_id: str,
    *,
    max_wait_s: float = MAX_WAIT_S,
    poll_interval_s: float = POLL_INTERVAL_S,
) -> dict[str, Any]:
    """Poll a video job until it completes; raises on failure or timeout."""
    start = time.monotonic()
    while time.monotonic() - start < max_wait_s:
        status = await openai.get_video(video_id)
        state = status.get("status")
        if state == "completed":
            return status
        if state == "failed":
            error = status.get("error")
            message = error.get("message") if isinstance(error, dict) else error
            raise RuntimeError(str(message) if message else "Video generation failed")
        logger.debug(f"Video {video_id} is {state}")
        await asyncio.sleep(poll_interval_s)
    raise TimeoutError("Video generation timed out")


@define_node(
    type="sora_video",
    name="Generate Sora Video",
    description="Generate AI video using OpenAI Sora 2",
    category=NodeCategory.INTEGRATION,
    input_schema=SoraVideoInput,
    output_schema=SoraVideoOutput,
    estimated_duration=60,
    capabilities=NodeCapabilities(supports_rerun=True),
)
async def sora_video_node(input: SoraVideoInput, context: ExecutionContext) -> NodeResult:
    openai = context.get_service("openai")
    if openai is None:
        return NodeResult.fail("OpenAI API key not configured. Please provide openai credentials.")

    try:
        start = time.monotonic()
        job = await openai.create_video(
            prompt=input.prompt, model=input.model, seconds=input.seconds, size=input.size
        )
        completed = await wait_for_video(
            openai, job["id"], max_wait_s=MAX_WAIT_S, poll_interval_s=POLL_INTERVAL_S
        )

        url = (completed.get("output") or {}).get("url")
        if not url:
            return NodeResult.fail("Video generation completed but no URL returned")

        return NodeResult.ok(
            SoraVideoOutput(
                video=SoraVideo(
                    url=url,
                    duration_seconds=input.seconds,
                    size=input.size,
                    model=input.model,
                ),
                processing_time_seconds=round(time.monotonic() - start),
            )
        )
    except Exception as e:
        return NodeResult.fail(str(e))
