"""Terminate a workflow branch."""

from __future__ import annotations

from pydantic import BaseModel

from jam_core import ExecutionContext, NodeCategory, NodeResult, define_node


class EndInput(BaseModel):
    reason: str | None = None
    success: bool = True


class EndOutput(BaseModel):
    terminated: bool
    reason: str
    success: bool


@define_node(
    type="end",
    name="End",
    description="End the workflow",
    category=NodeCategory.LOGIC,
    input_schema=EndInput,
    output_schema=EndOutput,
    estimated_duration=0,
)
async def end_node(input: EndInput, context: ExecutionContext) -> NodeResult:
    reason = input.reason or ("Workflow completed" if input.success else "Workflow stopped")
    return NodeResult.ok(EndOutput(terminated=True, reason=reason, success=input.success))
