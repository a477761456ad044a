"""Project a property out of every item in a list."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCategory, NodeResult, define_node
from jam_core.execution import resolve_path


class MapInput(BaseModel):
    items: list[Any]
    path: str = Field(description="Dot path to extract from each item, e.g. contact.email")


class MapOutput(BaseModel):
    results: list[Any]
    count: int


@define_node(
    type="map",
    name="Map",
    description="Extract a property from each item in a list",
    category=NodeCategory.TRANSFORM,
    input_schema=MapInput,
    output_schema=MapOutput,
    estimated_duration=0,
)
async def map_node(input: MapInput, context: ExecutionContext) -> NodeResult:
    try:
        results = [resolve_path(item, input.path) for item in input.items]
        return NodeResult.ok(MapOutput(results=results, count=len(results)))
    except Exception as e:
        return NodeResult.fail(str(e))
