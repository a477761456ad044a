"""Comparison operators shared by the conditional and filter nodes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

ComparisonOperator = Literal[
    "equals",
    "not_equals",
    "greater_than",
    "less_than",
    "contains",
    "exists",
    "not_exists",
]


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _contains(actual: Any, expected: Any) -> bool:
    if isinstance(actual, str):
        return expected is not None and str(expected) in actual
    if isinstance(actual, Mapping):
        return expected in actual
    if isinstance(actual, (list, tuple, set)):
        return expected in actual
    return False


def compare(operator: ComparisonOperator, actual: Any, expected: Any = None) -> bool:
    """
    Evaluate ``actual <operator> expected``.

    Ordering operators coerce both sides to numbers and are False when
    either side is not numeric.
    """
    if operator == "equals":
        return actual == expected
    if operator == "not_equals":
        return actual != expected
    if operator == "exists":
        return actual is not None
    if operator == "not_exists":
        return actual is None
    if operator == "contains":
        return _contains(actual, expected)

    left, right = _as_number(actual), _as_number(expected)
    if left is None or right is None:
        return False
    if operator == "greater_than":
        return left > right
    if operator == "less_than":
        return left < right
    raise ValueError(f"Unknown operator: {operator}")
