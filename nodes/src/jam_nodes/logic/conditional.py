"""Branch on a comparison against a workflow variable."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from jam_core import ExecutionContext, NodeCategory, NodeResult, define_node
from jam_nodes.logic.operators import ComparisonOperator, compare


class Condition(BaseModel):
    variable: str = Field(description="Dot path into workflow variables, e.g. contact.email")
    operator: ComparisonOperator
    value: Any = None


class ConditionalInput(BaseModel):
    condition: Condition
    true_node_id: str | None = Field(None, description="Node to run when the condition holds")
    false_node_id: str | None = Field(None, description="Node to run otherwise")


class ConditionalOutput(BaseModel):
    condition_met: bool
    selected_branch: Literal["true", "false"]
    next_node_id: str | None = None


@define_node(
    type="conditional",
    name="Conditional",
    description="Branch the workflow based on a condition",
    category=NodeCategory.LOGIC,
    input_schema=ConditionalInput,
    output_schema=ConditionalOutput,
    estimated_duration=0,
)
async def conditional_node(input: ConditionalInput, context: ExecutionContext) -> NodeResult:
    try:
        condition = input.condition
        actual = context.resolve_nested_path(condition.variable)
        met = compare(condition.operator, actual, condition.value)
        return NodeResult.ok(
            ConditionalOutput(
                condition_met=met,
                selected_branch="true" if met else "false",
                next_node_id=input.true_node_id if met else input.false_node_id,
            )
        )
    except Exception as e:
        return NodeResult.fail(str(e))
