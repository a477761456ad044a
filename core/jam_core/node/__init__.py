"""Node definition contract, registry and runner."""

from jam_core.node.definition import (
    Executor,
    NodeCapabilities,
    NodeCategory,
    NodeDefinition,
    NodeMetadata,
    NodeResult,
    define_node,
)
from jam_core.node.registry import DuplicateNodeError, NodeRegistry, create_registry
from jam_core.node.runner import execute_node, format_validation_error, validate_input

__all__ = [
    "DuplicateNodeError",
    "Executor",
    "NodeCapabilities",
    "NodeCategory",
    "NodeDefinition",
    "NodeMetadata",
    "NodeRegistry",
    "NodeResult",
    "create_registry",
    "define_node",
    "execute_node",
    "format_validation_error",
    "validate_input",
]
