"""
Validating runner for node executors.

execute_node() is the single entry point hosts use to run a node: it
resolves template references, validates input, runs the executor and
turns anything that escapes the executor into a failure result.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import BaseModel, ValidationError

from jam_core.execution import ExecutionContext, prepare_node_input
from jam_core.node.definition import NodeDefinition, NodeResult
from jam_core.observability import set_trace_context

logger = logging.getLogger(__name__)


def format_validation_error(error: ValidationError) -> str:
    """Render a ValidationError as ``field: message`` pairs."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ())) or "input"
        parts.append(f"{location}: {detail.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate_input(definition: NodeDefinition, raw_input: Any) -> BaseModel:
    """Validate raw input against the node's input model (raises ValidationError)."""
    if isinstance(raw_input, definition.input_schema):
        return raw_input
    return definition.input_schema.model_validate(raw_input if raw_input is not None else {})


async def execute_node(
    definition: NodeDefinition,
    raw_input: Any,
    context: ExecutionContext,
) -> NodeResult:
    """
    Run a node end to end.

    Args:
        definition: The node to run
        raw_input: Unvalidated input (dict, or an instance of the input model)
        context: Execution context with variables and services

    Returns:
        NodeResult. Invalid input yields a failure without calling the executor.
    """
    set_trace_context(
        workflow_execution_id=context.workflow_execution_id,
        node_type=definition.type,
        user_id=context.user_id,
    )

    prepared = prepare_node_input(raw_input, context)
    try:
        validated = validate_input(definition, prepared)
    except ValidationError as e:
        message = f"Invalid input: {format_validation_error(e)}"
        logger.info(message, extra={"event": "node_invalid_input"})
        return NodeResult.fail(message)

    logger.info(f"Executing node '{definition.type}'", extra={"event": "node_started"})
    start = time.perf_counter()
    try:
        result = await definition.executor(validated, context)
    except Exception as e:
        logger.exception(
            f"Node '{definition.type}' raised an unhandled exception",
            extra={"event": "node_crashed"},
        )
        return NodeResult.fail(str(e) or type(e).__name__)

    latency_ms = int((time.perf_counter() - start) * 1000)
    if not isinstance(result, NodeResult):
        logger.error(
            f"Node '{definition.type}' returned {type(result).__name__}, expected NodeResult"
        )
        return NodeResult.fail(f"Node '{definition.type}' returned an invalid result")

    if result.success:
        logger.info(
            f"Node '{definition.type}' succeeded",
            extra={"event": "node_succeeded", "latency_ms": latency_ms},
        )
    else:
        logger.warning(
            f"Node '{definition.type}' failed: {result.error}",
            extra={"event": "node_failed", "latency_ms": latency_ms},
        )
    return result
