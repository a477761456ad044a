"""Tests for CredentialManager."""

from __future__ import annotations

import pytest

from jam_core.credentials import (
    CredentialError,
    CredentialField,
    CredentialManager,
    CredentialSpec,
)

SPECS = {
    "apollo": CredentialSpec(
        service="apollo",
        display_name="Apollo.io",
        fields=[CredentialField("api_key", "TEST_APOLLO_API_KEY")],
        node_types=["search_contacts"],
        help_url="https://apollo.io",
        description="Contact search",
    ),
    "dataforseo": CredentialSpec(
        service="dataforseo",
        display_name="DataForSEO",
        fields=[
            CredentialField("login", "TEST_DFS_LOGIN", secret=False),
            CredentialField("password", "TEST_DFS_PASSWORD"),
        ],
        node_types=["seo_audit", "seo_keyword_research"],
    ),
}


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    """Keep tests away from the real environment and .env file."""
    monkeypatch.chdir(tmp_path)
    for var in ("TEST_APOLLO_API_KEY", "TEST_DFS_LOGIN", "TEST_DFS_PASSWORD"):
        monkeypatch.delenv(var, raising=False)


class TestCredentialManager:
    def test_get_from_environment(self, monkeypatch):
        monkeypatch.setenv("TEST_APOLLO_API_KEY", "env-key")

        creds = CredentialManager(SPECS)

        assert creds.get("apollo") == {"api_key": "env-key"}
        assert creds.source("apollo") == "environment"

    def test_get_returns_none_when_missing(self):
        creds = CredentialManager(SPECS)
        assert creds.get("apollo") is None
        assert creds.is_available("apollo") is False

    def test_unknown_service_raises(self):
        with pytest.raises(KeyError) as exc_info:
            CredentialManager(SPECS).get("unknown")
        assert "Available" in str(exc_info.value)

    def test_partial_credentials_are_not_available(self, monkeypatch):
        monkeypatch.setenv("TEST_DFS_LOGIN", "me")
        assert CredentialManager(SPECS).get("dataforseo") is None

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("TEST_DFS_LOGIN=me\nTEST_DFS_PASSWORD=pw\n")

        creds = CredentialManager(SPECS)

        assert creds.get("dataforseo") == {"login": "me", "password": "pw"}
        assert creds.source("dataforseo") == "dotenv"

    def test_priority_override_then_store_then_env(self, monkeypatch):
        monkeypatch.setenv("TEST_APOLLO_API_KEY", "env-key")

        stored = CredentialManager(SPECS, store={"apollo": {"api_key": "saved-key"}})
        assert stored.get("apollo") == {"api_key": "saved-key"}
        assert stored.source("apollo") == "saved"

        overridden = CredentialManager.for_testing({"apollo": {"api_key": "test-key"}}, SPECS)
        assert overridden.get("apollo") == {"api_key": "test-key"}
        assert overridden.source("apollo") == "override"

    def test_services_for_node_type(self):
        creds = CredentialManager(SPECS)
        assert creds.services_for_node_type("seo_audit") == ["dataforseo"]
        assert creds.services_for_node_type("map") == []

    def test_validate_for_node_types_raises_with_instructions(self):
        creds = CredentialManager(SPECS)

        with pytest.raises(CredentialError) as exc_info:
            creds.validate_for_node_types(["search_contacts", "map"])

        message = str(exc_info.value)
        assert "search_contacts requires Apollo.io" in message
        assert "export TEST_APOLLO_API_KEY" in message
        assert "https://apollo.io" in message

    def test_validate_passes_when_configured(self):
        creds = CredentialManager.for_testing({"apollo": {"api_key": "k"}}, SPECS)
        creds.validate_for_node_types(["search_contacts"])

    def test_resolve_for_node_types(self):
        creds = CredentialManager.for_testing(
            {"apollo": {"api_key": "k"}, "dataforseo": {"login": "l", "password": "p"}},
            SPECS,
        )

        assert creds.resolve_for_node_types(["search_contacts"]) == {"apollo": {"api_key": "k"}}
        assert set(creds.resolve_all()) == {"apollo", "dataforseo"}
