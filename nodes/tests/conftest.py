"""Shared fixtures for node tests."""

from __future__ import annotations

import pytest

from jam_core.execution import ExecutionContext


@pytest.fixture
def make_context():
    """Build an ExecutionContext with the given service handles and variables."""

    def _make(services: dict | None = None, variables: dict | None = None) -> ExecutionContext:
        return ExecutionContext(
            user_id="test-user",
            workflow_execution_id="exec-test-0001",
            variables=dict(variables or {}),
            services=dict(services or {}),
        )

    return _make
