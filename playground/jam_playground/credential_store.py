"""
Saved playground credentials.

Stored as JSON at ``$JAM_NODES_HOME/credentials.json`` with owner-only
permissions. Values saved here are picked up by CredentialManager ahead
of the environment.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from jam_core.config import get_jam_home

logger = logging.getLogger(__name__)

FILE_MODE = 0o600


class CredentialStore:
    """Read/write access to the saved credentials file."""

    def __init__(self, path: Path | None = None):
        self.path = path or get_jam_home() / "credentials.json"

    def load(self) -> dict[str, dict[str, str]]:
        """Return saved credentials keyed by service; a missing or corrupt file yields {}."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable credentials file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {
            service: {k: str(v) for k, v in values.items()}
            for service, values in data.items()
            if isinstance(values, dict)
        }

    def _write(self, data: dict[str, dict[str, str]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.chmod(self.path, FILE_MODE)

    def save(self, service: str, values: dict[str, str]) -> None:
        data = self.load()
        data[service] = dict(values)
        self._write(data)
        logger.info(f"Saved credentials for {service} to {self.path}")

    def remove(self, service: str) -> bool:
        """Delete a service's saved credentials. Returns False if none were saved."""
        data = self.load()
        if service not in data:
            return False
        del data[service]
        self._write(data)
        return True

    def services(self) -> list[str]:
        return sorted(self.load())
