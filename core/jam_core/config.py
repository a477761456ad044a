"""Shared jam-nodes configuration.

Reads ``$JAM_NODES_HOME/configuration.json`` (default ``~/.jam-nodes``)
so the CLI and the web playground share one set of defaults.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# ---------------------------------------------------------------------------
# Low-level config file access
# ---------------------------------------------------------------------------


def get_jam_home() -> Path:
    """Return the jam-nodes home directory (not created)."""
    override = os.environ.get("JAM_NODES_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".jam-nodes"


def get_config_file() -> Path:
    return get_jam_home() / "configuration.json"


def get_jam_config() -> dict[str, Any]:
    """Load configuration.json; a missing or unreadable file yields {}."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    try:
        with open(config_file, encoding="utf-8-sig") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------------------
# Derived helpers
# ---------------------------------------------------------------------------


def _playground_setting(key: str, default: Any) -> Any:
    return get_jam_config().get("playground", {}).get(key, default)


def get_user_id() -> str:
    return _playground_setting("user_id", "playground-user")


def get_log_level() -> str:
    return os.environ.get("JAM_LOG_LEVEL") or _playground_setting("log_level", "WARNING")


def get_log_format() -> str:
    return _playground_setting("log_format", "auto")


def get_mock_delay_ms() -> int:
    return int(_playground_setting("mock_delay_ms", 500))


def get_web_host() -> str:
    return _playground_setting("web_host", "127.0.0.1")


def get_web_port() -> int:
    return int(_playground_setting("web_port", 3210))


# ---------------------------------------------------------------------------
# PlaygroundConfig – shared by the CLI and the web playground
# ---------------------------------------------------------------------------


@dataclass
class PlaygroundConfig:
    """Playground configuration loaded from configuration.json."""

    user_id: str = field(default_factory=get_user_id)
    log_level: str = field(default_factory=get_log_level)
    log_format: str = field(default_factory=get_log_format)
    mock_delay_ms: int = field(default_factory=get_mock_delay_ms)
    web_host: str = field(default_factory=get_web_host)
    web_port: int = field(default_factory=get_web_port)
