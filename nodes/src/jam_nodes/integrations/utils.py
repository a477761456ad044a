"""Helpers for normalizing loosely-typed third-party payloads."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

HASHTAG_PATTERN = re.compile(r"#(\w+)")


def first_present(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first truthy value among ``keys``."""
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return default


def extract_hashtags(text: str) -> list[str]:
    return HASHTAG_PATTERN.findall(text or "")


def to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()
