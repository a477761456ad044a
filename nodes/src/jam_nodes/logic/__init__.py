"""Control-flow nodes."""

from jam_nodes.logic.conditional import ConditionalInput, ConditionalOutput, conditional_node
from jam_nodes.logic.delay import DelayInput, DelayOutput, delay_node
from jam_nodes.logic.end import EndInput, EndOutput, end_node
from jam_nodes.logic.operators import ComparisonOperator, compare

__all__ = [
    "ComparisonOperator",
    "ConditionalInput",
    "ConditionalOutput",
    "DelayInput",
    "DelayOutput",
    "EndInput",
    "EndOutput",
    "compare",
    "conditional_node",
    "delay_node",
    "end_node",
]
