"""Tests for ExecutionContext, service injection and input templating."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from jam_core.execution import (
    ExecutionContext,
    create_execution_context,
    create_services,
    prepare_node_input,
    resolve_path,
)


def make_context(variables=None) -> ExecutionContext:
    return ExecutionContext(
        user_id="user-1",
        workflow_execution_id="exec-1",
        variables=variables or {},
    )


class TestResolveNestedPath:
    def test_resolves_deep_value(self):
        context = make_context({"a": {"b": {"c": 42}}})
        assert context.resolve_nested_path("a.b.c") == 42

    def test_missing_segment_is_none(self):
        context = make_context({"a": {}})
        assert context.resolve_nested_path("a.b.c") is None

    def test_custom_default(self):
        context = make_context({})
        assert context.resolve_nested_path("x", default="fallback") == "fallback"

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("items.0.name", "first"),
            ("items.5.name", None),
            ("items.x", None),
            ("count.value", None),
            ("title.length", None),
            ("", None),
        ],
    )
    def test_never_raises(self, path, expected):
        context = make_context({"items": [{"name": "first"}], "count": 3, "title": "jam"})
        assert context.resolve_nested_path(path) == expected

    def test_resolves_object_attributes(self):
        contact = MagicMock(spec=["company"])
        contact.company = "Acme"
        assert resolve_path({"contact": contact}, "contact.company") == "Acme"

    def test_raising_property_resolves_to_default(self):
        class Lead:
            @property
            def score(self):
                raise RuntimeError("not loaded")

        context = make_context({"lead": Lead()})
        assert context.resolve_nested_path("lead.score") is None
        assert context.resolve_nested_path("lead.score", default=0) == 0


class TestCreateServices:
    def test_slot_per_known_service(self):
        apollo_factory = MagicMock(return_value="apollo-handle")
        openai_factory = MagicMock(return_value="openai-handle")

        services = create_services(
            {"apollo": {"api_key": "k"}},
            {"apollo": apollo_factory, "openai": openai_factory},
        )

        assert services == {"apollo": "apollo-handle", "openai": None}
        apollo_factory.assert_called_once_with({"api_key": "k"})
        openai_factory.assert_not_called()

    def test_incomplete_credentials_leave_slot_empty(self):
        def factory(fields):
            return fields["api_key"]

        services = create_services({"apollo": {"other": "x"}}, {"apollo": factory})
        assert services == {"apollo": None}

    def test_context_builder_generates_execution_id(self):
        context = create_execution_context(user_id="u1", variables={"sender_name": "Ada"})

        assert context.workflow_execution_id.startswith("playground_")
        assert context.variables == {"sender_name": "Ada"}
        assert context.services == {}
        assert context.get_service("apollo") is None


class TestPrepareNodeInput:
    def setup_method(self):
        self.context = make_context(
            {"lead": {"name": "Ada", "tags": ["a", "b"]}, "limit": 5}
        )

    def test_whole_string_reference_keeps_type(self):
        prepared = prepare_node_input({"items": "{{lead.tags}}", "limit": "{{ limit }}"}, self.context)
        assert prepared == {"items": ["a", "b"], "limit": 5}

    def test_embedded_reference_is_interpolated(self):
        prepared = prepare_node_input({"subject": "Hi {{lead.name}}!"}, self.context)
        assert prepared == {"subject": "Hi Ada!"}

    def test_unresolved_references(self):
        prepared = prepare_node_input(
            {"whole": "{{missing}}", "embedded": "Hi {{missing}}"}, self.context
        )
        assert prepared == {"whole": None, "embedded": "Hi {{missing}}"}

    def test_nested_structures_and_non_strings(self):
        raw = {"list": ["{{limit}}", 3, {"deep": "{{lead.name}}"}], "flag": True}
        assert prepare_node_input(raw, self.context) == {
            "list": [5, 3, {"deep": "Ada"}],
            "flag": True,
        }

    def test_original_not_mutated(self):
        raw = {"name": "{{lead.name}}"}
        prepare_node_input(raw, self.context)
        assert raw == {"name": "{{lead.name}}"}
