"""Execution context, service injection and input templating."""

from jam_core.execution.context import (
    ExecutionContext,
    ServiceFactory,
    create_execution_context,
    create_services,
    generate_execution_id,
    resolve_path,
)
from jam_core.execution.input import prepare_node_input

__all__ = [
    "ExecutionContext",
    "ServiceFactory",
    "create_execution_context",
    "create_services",
    "generate_execution_id",
    "prepare_node_input",
    "resolve_path",
]
