"""Tests for field derivation and example input building."""

from __future__ import annotations

from typing import Literal

import pytest
from pydantic import BaseModel, Field

from jam_core.schema import (
    FieldType,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    StringSchema,
    build_example_input,
    derive_fields,
    humanize_label,
)


class SearchInput(BaseModel):
    job_titles: list[str] = Field(description="Titles to search for")
    location: str | None = None
    limit: int = 10
    verified_only: bool = False
    seniority: Literal["junior", "senior", "executive"] = "senior"
    filters: dict[str, str] | None = None
    topic: str


class TestDeriveFields:
    def test_optional_and_required(self):
        node = ObjectSchema({"a": OptionalSchema(NumberSchema()), "b": StringSchema()})

        fields = derive_fields(node)

        assert [f.name for f in fields] == ["a", "b"]
        assert fields[0].required is False
        assert fields[0].type == FieldType.NUMBER
        assert fields[1].required is True
        assert fields[1].type == FieldType.TEXT

    def test_non_object_root_yields_nothing(self):
        assert derive_fields(StringSchema()) == []
        assert derive_fields(list[str]) == []

    def test_pydantic_model(self):
        fields = {f.name: f for f in derive_fields(SearchInput)}

        assert fields["job_titles"].type == FieldType.ARRAY
        assert fields["job_titles"].required is True
        assert fields["job_titles"].description == "Titles to search for"
        assert fields["location"].required is False
        assert fields["limit"].type == FieldType.NUMBER
        assert fields["limit"].default == 10
        assert fields["limit"].required is False
        assert fields["verified_only"].type == FieldType.CHECKBOX
        assert fields["seniority"].type == FieldType.SELECT
        assert fields["seniority"].options == ["junior", "senior", "executive"]
        assert fields["filters"].type == FieldType.OBJECT

    def test_to_dict(self):
        limit = next(f for f in derive_fields(SearchInput) if f.name == "limit")
        assert limit.to_dict() == {
            "name": "limit",
            "label": "Limit",
            "type": "number",
            "required": False,
            "default": 10,
        }


class TestHumanizeLabel:
    @pytest.mark.parametrize(
        "name,label",
        [
            ("personTitles", "Person Titles"),
            ("max_results", "Max results"),
            ("url", "Url"),
            ("userID", "User ID"),
        ],
    )
    def test_labels(self, name, label):
        assert humanize_label(name) == label


class TestBuildExampleInput:
    def test_required_and_defaults_included(self):
        example = build_example_input(SearchInput)

        assert example["topic"] == "example_topic"
        assert example["limit"] == 10
        assert example["seniority"] == "senior"
        assert example["job_titles"] == ["mock_string", "mock_string"]
        assert "location" not in example
        assert "filters" not in example

    def test_example_validates(self):
        SearchInput.model_validate(build_example_input(SearchInput))

    def test_name_hints_respect_field_bounds(self):
        class CappedInput(BaseModel):
            limit: int = Field(le=5)
            timeout_ms: int = Field(ge=5000)
            page: int = Field(gt=1, le=3)
            count: int = Field(ge=1, le=100)

        example = build_example_input(CappedInput)

        assert example == {"limit": 5, "timeout_ms": 5000, "page": 2, "count": 5}
        CappedInput.model_validate(example)
