"""Structured logging with execution context propagation."""

from jam_core.observability.logging import (
    HumanReadableFormatter,
    StructuredFormatter,
    clear_trace_context,
    configure_logging,
    get_trace_context,
    set_trace_context,
)

__all__ = [
    "HumanReadableFormatter",
    "StructuredFormatter",
    "clear_trace_context",
    "configure_logging",
    "get_trace_context",
    "set_trace_context",
]
