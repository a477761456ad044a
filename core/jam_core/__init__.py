"""
jam_core - schema-driven execution engine for workflow nodes.

Provides the node contract and registry, the execution context,
schema introspection (mock synthesis and field derivation) and the
resilient fetch primitive used by integrations.
"""

from jam_core.execution import ExecutionContext, create_execution_context, prepare_node_input
from jam_core.http import FetchResponse, FetchRetryError, HttpStatusError, RetryPolicy, fetch_with_retry
from jam_core.node import (
    DuplicateNodeError,
    NodeCapabilities,
    NodeCategory,
    NodeDefinition,
    NodeMetadata,
    NodeRegistry,
    NodeResult,
    create_registry,
    define_node,
    execute_node,
)
from jam_core.schema import MockGenerator, build_example_input, derive_fields, describe, synthesize

__version__ = "0.1.0"

__all__ = [
    "DuplicateNodeError",
    "ExecutionContext",
    "FetchResponse",
    "FetchRetryError",
    "HttpStatusError",
    "MockGenerator",
    "NodeCapabilities",
    "NodeCategory",
    "NodeDefinition",
    "NodeMetadata",
    "NodeRegistry",
    "NodeResult",
    "RetryPolicy",
    "build_example_input",
    "create_execution_context",
    "create_registry",
    "define_node",
    "derive_fields",
    "describe",
    "execute_node",
    "fetch_with_retry",
    "prepare_node_input",
    "synthesize",
]
