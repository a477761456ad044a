"""Shared fixtures for playground tests."""

from __future__ import annotations

import os

import pytest

from jam_core.config import PlaygroundConfig
from jam_playground.credential_store import CredentialStore
from jam_playground.runner import Playground


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.jam-nodes, environment and .env."""
    for name in list(os.environ):
        if name.startswith("JAM_"):
            monkeypatch.delenv(name)
    home = tmp_path / "jam-home"
    monkeypatch.setenv("JAM_NODES_HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def store(isolated_home) -> CredentialStore:
    return CredentialStore(isolated_home / "credentials.json")


@pytest.fixture
def playground(store) -> Playground:
    return Playground(config=PlaygroundConfig(mock_delay_ms=0), store=store)
