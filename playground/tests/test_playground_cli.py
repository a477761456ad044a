"""Tests for the jam-playground command line."""

import json
import stat
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from jam_core.node import NodeResult
from jam_playground.cli import cli, render_env_template


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr("jam_playground.cli.configure_logging", lambda **kwargs: None)


@pytest.fixture
def invoke(playground):
    runner = CliRunner()

    def _invoke(*args, input=None):
        return runner.invoke(cli, list(args), obj=playground, input=input)

    return _invoke


class TestList:
    def test_groups_by_category(self, invoke):
        result = invoke("list")

        assert result.exit_code == 0
        assert "Logic" in result.output
        assert "AI Actions" in result.output
        assert "(search_contacts)" in result.output
        assert "16 node(s)" in result.output

    def test_json_filtered_by_category(self, invoke):
        result = invoke("list", "--json", "--category", "logic")

        assert result.exit_code == 0
        nodes = json.loads(result.output)
        assert [n["type"] for n in nodes] == ["conditional", "end", "delay"]
        assert all(n["category"] == "logic" for n in nodes)

    def test_rejects_unknown_category(self, invoke):
        result = invoke("list", "--category", "magic")
        assert result.exit_code == 2


class TestRun:
    def test_mock_with_example_input(self, invoke):
        result = invoke("run", "conditional", "--mock", "--example", "--no-confirm")

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["success"] is True
        assert payload["output"]["selected_branch"] == "true"

    def test_real_run_with_variables(self, invoke):
        node_input = json.dumps(
            {"condition": {"variable": "stage", "operator": "equals", "value": "won"}}
        )
        result = invoke(
            "run", "conditional", "--input", node_input, "--var", 'stage="won"', "--no-confirm"
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["output"]["condition_met"] is True

    def test_failure_exits_nonzero(self, invoke):
        result = invoke("run", "delay", "--mock", "--input", '{"duration_ms": -1}', "--no-confirm")

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["success"] is False
        assert payload["error"].startswith("Invalid input:")

    def test_bad_json_input(self, invoke):
        result = invoke("run", "delay", "--mock", "--input", "{oops", "--no-confirm")

        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_bad_var(self, invoke):
        result = invoke("run", "end", "--mock", "--example", "--var", "novalue", "--no-confirm")

        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output

    def test_unknown_node(self, invoke):
        result = invoke("run", "teleport", "--mock")

        assert result.exit_code == 1
        assert "Unknown node type 'teleport'" in result.output

    def test_select_node_interactively(self, invoke):
        result = invoke("run", "--mock", "--example", "--no-confirm", input="2\n")

        assert result.exit_code == 0
        assert "Select a node" in result.output
        assert '"terminated": true' in result.output

    def test_prompts_for_input_fields(self, invoke):
        # items, path (skipped), operator, value
        result = invoke("run", "filter", "--no-confirm", input="[1, 5, 10]\n\ngreater_than\n3\n")

        assert result.exit_code == 0, result.output
        assert '"results": [\n      5,\n      10\n    ]' in result.output
        assert '"filtered_out": 1' in result.output

    def test_confirmation_can_abort(self, invoke):
        result = invoke("run", "end", "--mock", "--example", input="n\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output

    def test_prompts_for_missing_credentials_and_saves(self, invoke, store):
        fake = AsyncMock(return_value=NodeResult.ok({"contacts": [], "total_found": 0}))

        with patch("jam_playground.runner.execute_node", fake):
            result = invoke(
                "run",
                "search_contacts",
                "--input",
                '{"person_titles": ["CTO"]}',
                "--no-confirm",
                input="apollo-key\ny\n",
            )

        assert result.exit_code == 0, result.output
        assert "Apollo.io credentials are required" in result.output
        assert store.load() == {"apollo": {"api_key": "apollo-key"}}
        context = fake.call_args.args[2]
        assert context.services["apollo"] is not None

    def test_saved_credentials_skip_prompt(self, invoke, store):
        store.save("apollo", {"api_key": "saved"})
        fake = AsyncMock(return_value=NodeResult.ok({"contacts": [], "total_found": 0}))

        with patch("jam_playground.runner.execute_node", fake):
            result = invoke("run", "search_contacts", "--example", "--no-confirm")

        assert result.exit_code == 0
        assert "credentials are required" not in result.output


class TestInit:
    def test_writes_template(self, invoke, tmp_path):
        result = invoke("init")

        assert result.exit_code == 0
        content = (tmp_path / ".env").read_text(encoding="utf-8")
        assert "JAM_APOLLO_API_KEY=" in content
        assert "JAM_DATAFORSEO_PASSWORD=" in content
        assert "# Apollo.io: search_contacts" in content

    def test_refuses_to_overwrite(self, invoke, tmp_path):
        (tmp_path / ".env").write_text("KEEP=1\n", encoding="utf-8")

        result = invoke("init")

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (tmp_path / ".env").read_text(encoding="utf-8") == "KEEP=1\n"

    def test_force_overwrites_custom_path(self, invoke, tmp_path):
        target = tmp_path / "custom.env"
        target.write_text("OLD=1\n", encoding="utf-8")

        result = invoke("init", "--force", "--path", str(target))

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == render_env_template()


class TestCredentials:
    def test_set_list_remove(self, invoke, store):
        result = invoke("credentials", "set", "twitter", input="tw-key\n")
        assert result.exit_code == 0
        assert store.load() == {"twitter": {"api_key": "tw-key"}}
        assert stat.S_IMODE(store.path.stat().st_mode) == 0o600

        result = invoke("credentials", "list")
        assert result.exit_code == 0
        twitter_line = next(line for line in result.output.splitlines() if " twitter " in line)
        assert "configured (saved)" in twitter_line
        apollo_line = next(line for line in result.output.splitlines() if " apollo " in line)
        assert "not configured" in apollo_line

        result = invoke("credentials", "remove", "twitter")
        assert result.exit_code == 0
        assert "Removed" in result.output
        assert store.load() == {}

    def test_remove_missing(self, invoke):
        result = invoke("credentials", "remove", "apollo")

        assert result.exit_code == 0
        assert "No saved credentials" in result.output

    def test_unknown_service(self, invoke):
        result = invoke("credentials", "set", "myspace")

        assert result.exit_code == 1
        assert "Unknown service 'myspace'" in result.output

    def test_multi_field_service(self, invoke, store):
        result = invoke("credentials", "set", "dataforseo", input="me@example.com\nhunter2\n")

        assert result.exit_code == 0
        assert store.load()["dataforseo"] == {"login": "me@example.com", "password": "hunter2"}
