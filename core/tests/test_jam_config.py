"""Tests for configuration loading."""

from __future__ import annotations

import json

import pytest

from jam_core.config import PlaygroundConfig, get_jam_config, get_jam_home


@pytest.fixture
def jam_home(tmp_path, monkeypatch):
    monkeypatch.setenv("JAM_NODES_HOME", str(tmp_path))
    monkeypatch.delenv("JAM_LOG_LEVEL", raising=False)
    return tmp_path


def test_home_override(jam_home):
    assert get_jam_home() == jam_home


def test_missing_file_yields_empty_config(jam_home):
    assert get_jam_config() == {}


def test_corrupt_file_yields_empty_config(jam_home):
    (jam_home / "configuration.json").write_text("{not json")
    assert get_jam_config() == {}


def test_playground_config_reads_file(jam_home):
    (jam_home / "configuration.json").write_text(
        json.dumps({"playground": {"user_id": "ada", "web_port": 9000, "mock_delay_ms": 0}})
    )

    config = PlaygroundConfig()

    assert config.user_id == "ada"
    assert config.web_port == 9000
    assert config.mock_delay_ms == 0
    assert config.web_host == "127.0.0.1"


def test_log_level_env_override(jam_home, monkeypatch):
    monkeypatch.setenv("JAM_LOG_LEVEL", "DEBUG")
    assert PlaygroundConfig().log_level == "DEBUG"
