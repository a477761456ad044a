"""Keep the items of a list that satisfy a comparison."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCategory, NodeResult, define_node
from jam_core.execution import resolve_path
from jam_nodes.logic.operators import ComparisonOperator, compare


class FilterInput(BaseModel):
    items: list[Any]
    path: str | None = Field(None, description="Dot path on each item; omit to compare the item itself")
    operator: ComparisonOperator
    value: Any = None


class FilterOutput(BaseModel):
    results: list[Any]
    count: int
    filtered_out: int


@define_node(
    type="filter",
    name="Filter",
    description="Filter a list by a condition on each item",
    category=NodeCategory.TRANSFORM,
    input_schema=FilterInput,
    output_schema=FilterOutput,
    estimated_duration=0,
)
async def filter_node(input: FilterInput, context: ExecutionContext) -> NodeResult:
    try:
        results = []
        for item in input.items:
            actual = resolve_path(item, input.path) if input.path else item
            if compare(input.operator, actual, input.value):
                results.append(item)
        return NodeResult.ok(
            FilterOutput(
                results=results,
                count=len(results),
                filtered_out=len(input.items) - len(results),
            )
        )
    except Exception as e:
        return NodeResult.fail(str(e))
