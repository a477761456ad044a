"""
Node contract: metadata, input/output models, capabilities and executor.

Nodes are declared with the define_node decorator:

    @define_node(
        type="delay",
        name="Delay",
        description="Wait before continuing",
        category=NodeCategory.LOGIC,
        input_schema=DelayInput,
        output_schema=DelayOutput,
    )
    async def delay_node(input: DelayInput, context: ExecutionContext) -> NodeResult:
        ...

The decorated name is bound to the resulting NodeDefinition.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any

from pydantic import BaseModel

from jam_core.execution import ExecutionContext
from jam_core.schema import SchemaNode, describe


class NodeCategory(str, Enum):
    LOGIC = "logic"
    TRANSFORM = "transform"
    INTEGRATION = "integration"
    ACTION = "action"


@dataclass(frozen=True)
class NodeCapabilities:
    """Optional behaviors a node declares support for."""

    supports_enrichment: bool = False
    supports_bulk_actions: bool = False
    supports_rerun: bool = False
    supports_approval: bool = False

    def enabled(self) -> list[str]:
        return [name for name, value in self.__dict__.items() if value]


@dataclass
class NodeResult:
    """Uniform success/failure envelope returned by every executor."""

    success: bool
    output: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, output: Any = None) -> NodeResult:
        return cls(success=True, output=output)

    @classmethod
    def fail(cls, error: str) -> NodeResult:
        return cls(success=False, error=error)

    def output_dict(self) -> Any:
        if isinstance(self.output, BaseModel):
            return self.output.model_dump(mode="json", by_alias=True)
        return self.output

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "output": self.output_dict()}
        return {"success": False, "error": self.error}


Executor = Callable[[Any, ExecutionContext], Awaitable[NodeResult]]


class NodeMetadata(BaseModel):
    """Serializable summary of a node definition."""

    type: str
    name: str
    description: str
    category: NodeCategory
    estimated_duration: float
    capabilities: list[str]


@dataclass(frozen=True)
class NodeDefinition:
    """A registered unit of work with declared input/output shape."""

    type: str
    name: str
    description: str
    category: NodeCategory
    input_schema: type[BaseModel]
    output_schema: type[BaseModel]
    executor: Executor = field(repr=False)
    estimated_duration: float = 5.0
    capabilities: NodeCapabilities = field(default_factory=NodeCapabilities)

    @cached_property
    def input_description(self) -> SchemaNode:
        return describe(self.input_schema)

    @cached_property
    def output_description(self) -> SchemaNode:
        return describe(self.output_schema)

    def metadata(self) -> NodeMetadata:
        return NodeMetadata(
            type=self.type,
            name=self.name,
            description=self.description,
            category=self.category,
            estimated_duration=self.estimated_duration,
            capabilities=self.capabilities.enabled(),
        )


def define_node(
    *,
    type: str,
    name: str,
    description: str,
    category: NodeCategory | str,
    input_schema: type[BaseModel],
    output_schema: type[BaseModel],
    estimated_duration: float = 5.0,
    capabilities: NodeCapabilities | None = None,
) -> Callable[[Executor], NodeDefinition]:
    """Decorator turning an async executor into a NodeDefinition."""

    def decorator(executor: Executor) -> NodeDefinition:
        return NodeDefinition(
            type=type,
            name=name,
            description=description,
            category=NodeCategory(category),
            input_schema=input_schema,
            output_schema=output_schema,
            executor=executor,
            estimated_duration=estimated_duration,
            capabilities=capabilities or NodeCapabilities(),
        )

    return decorator
