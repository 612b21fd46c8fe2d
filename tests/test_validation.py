# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for validation module."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from unbound_sdk.errors import InvalidArgument
from unbound_sdk.validation import Param, Schema, kind_of, validate_params


class TestParam:
    """Tests for Param declarations."""

    def test_defaults(self):
        param = Param("string")
        assert param.required is False
        assert param.alias is None
        assert param.default is None

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError, match="Unknown parameter kind"):
            Param("integer")


class TestSchema:
    """Tests for Schema container behavior."""

    def test_iteration_keeps_declaration_order(self):
        schema = Schema(b=Param("string"), a=Param("number"))
        assert list(schema) == ["b", "a"]
        assert len(schema) == 2
        assert "a" in schema

    def test_wire_name_is_camel_case(self):
        schema = Schema(speaking_rate=Param("number"), text=Param("string"))
        assert schema.wire_name("speaking_rate") == "speakingRate"
        assert schema.wire_name("text") == "text"

    def test_wire_name_uses_alias(self):
        schema = Schema(from_=Param("string", alias="from"))
        assert schema.wire_name("from_") == "from"

    def test_extend_returns_new_schema(self):
        base = Schema(id=Param("string", required=True))
        extended = base.extend(name=Param("string"))
        assert list(extended) == ["id", "name"]
        assert list(base) == ["id"]

    def test_extend_overrides_existing_param(self):
        base = Schema(name=Param("string"))
        extended = base.extend(name=Param("string", required=True))
        assert extended.params["name"].required is True


class TestValidateParams:
    """Tests for validate_params()."""

    @pytest.fixture
    def schema(self):
        return Schema(
            method=Param("string", required=True),
            temperature=Param("number"),
            stream=Param("boolean"),
            messages=Param("array"),
            options=Param("object"),
        )

    def test_returns_wire_payload(self, schema):
        payload = validate_params({"method": "gpt", "temperature": 0.5}, schema)
        assert payload == {"method": "gpt", "temperature": 0.5}

    def test_missing_required_parameter(self, schema):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_params({}, schema)
        assert exc_info.value.param == "method"
        assert "Missing required parameter method" in str(exc_info.value)

    def test_none_counts_as_missing(self, schema):
        with pytest.raises(InvalidArgument, match="Missing required parameter method"):
            validate_params({"method": None}, schema)

    def test_missing_reported_before_type_errors(self, schema):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_params({"temperature": "hot"}, schema)
        assert exc_info.value.param == "method"

    def test_wrong_kind_reports_expected_and_actual(self, schema):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_params({"method": 42}, schema)
        error = exc_info.value
        assert error.param == "method"
        assert error.expected == "string"
        assert str(error) == "Invalid type for parameter method: expected string, got number"

    def test_boolean_is_not_a_number(self, schema):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_params({"method": "gpt", "temperature": True}, schema)
        assert exc_info.value.param == "temperature"

    def test_numeric_string_is_not_a_number(self, schema):
        with pytest.raises(InvalidArgument):
            validate_params({"method": "gpt", "temperature": "1"}, schema)

    def test_number_is_not_a_boolean(self, schema):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_params({"method": "gpt", "stream": 1}, schema)
        assert exc_info.value.expected == "boolean"

    def test_integer_and_float_are_numbers(self, schema):
        assert validate_params({"method": "m", "temperature": 1}, schema)["temperature"] == 1
        assert validate_params({"method": "m", "temperature": 1.5}, schema)["temperature"] == 1.5

    def test_array_and_object_kinds(self, schema):
        payload = validate_params(
            {"method": "m", "messages": [{"role": "user"}], "options": {"a": 1}}, schema
        )
        assert payload["messages"] == [{"role": "user"}]
        assert payload["options"] == {"a": 1}

    def test_object_is_not_an_array(self, schema):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_params({"method": "m", "messages": {"role": "user"}}, schema)
        assert str(exc_info.value).endswith("expected array, got object")

    def test_object_kind_accepts_any_mapping(self, schema):
        options = MappingProxyType({"a": 1})
        payload = validate_params({"method": "m", "options": options}, schema)
        assert payload["options"] == {"a": 1}
        assert type(payload["options"]) is dict

    def test_undeclared_names_ignored(self, schema):
        payload = validate_params({"method": "m", "unknown": object()}, schema)
        assert payload == {"method": "m"}

    def test_defaults_filled_in(self):
        schema = Schema(action=Param("string", default="start"), call_id=Param("string"))
        assert validate_params({"call_id": "c"}, schema) == {"action": "start", "callId": "c"}

    def test_explicit_value_overrides_default(self):
        schema = Schema(action=Param("string", default="start"))
        assert validate_params({"action": "stop"}, schema) == {"action": "stop"}

    def test_any_kind_accepts_everything(self):
        schema = Schema(to=Param("any", required=True))
        assert validate_params({"to": "a@b.c"}, schema) == {"to": "a@b.c"}
        assert validate_params({"to": ["a@b.c", "d@e.f"]}, schema) == {"to": ["a@b.c", "d@e.f"]}

    def test_param_names_clashing_with_model_attributes(self):
        schema = Schema(schema=Param("string"), copy=Param("boolean"))
        assert validate_params({"schema": "s", "copy": True}, schema) == {
            "schema": "s",
            "copy": True,
        }


class TestKindOf:
    """Tests for kind_of()."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, "null"),
            (True, "boolean"),
            (3, "number"),
            (2.5, "number"),
            ("x", "string"),
            ([1], "array"),
            ((1,), "array"),
            ({"a": 1}, "object"),
        ],
    )
    def test_kinds(self, value, kind):
        assert kind_of(value) == kind
