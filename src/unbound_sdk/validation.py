# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Parameter schema declarations and validation.

Every service operation declares a Schema mapping its parameter names to a
Param (kind + required flag). validate_params() checks the actual values
against it before any request is built:

- A required parameter that is absent (or None) is reported first.
- Present values are kind-checked with a strict Pydantic model built once
  per schema, so ``True`` is never accepted as a number and ``"1"`` never
  as a number either.
- Names not declared in the schema are ignored.

The return value is the request payload: declared values that are present,
keyed by their wire name (camelCase unless an explicit alias is given).

Example:
    ::

        schema = Schema(
            text=Param("string", required=True),
            speaking_rate=Param("number"),
        )
        validate_params({"text": "hi", "speaking_rate": 1.2}, schema)
        # {"text": "hi", "speakingRate": 1.2}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Union

from pydantic import ConfigDict, Field, InstanceOf, ValidationError, create_model
from pydantic.alias_generators import to_camel

from .errors import InvalidArgument

KINDS = ("string", "number", "boolean", "array", "object", "any")

_KIND_TYPES: dict[str, Any] = {
    "string": str,
    "number": Union[int, float],
    "boolean": bool,
    "array": Union[list, tuple],
    "object": InstanceOf[Mapping],
    "any": Any,
}


@dataclass(frozen=True)
class Param:
    """Declaration of a single operation parameter.

    Attributes:
        kind: One of "string", "number", "boolean", "array", "object", or
            "any" for values that are forwarded without a kind check.
        required: Whether the caller must supply a non-None value.
        alias: Wire name override. Defaults to the camelCase form of the name.
        default: Value sent when the caller omits the parameter.
    """

    kind: str
    required: bool = False
    alias: str | None = None
    default: Any = None

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown parameter kind '{self.kind}'")


class Schema:
    """Ordered, static set of Param declarations for one operation."""

    def __init__(self, **params: Param):
        self.params: dict[str, Param] = params

    def __contains__(self, name: str) -> bool:
        return name in self.params

    def __iter__(self):
        return iter(self.params)

    def __len__(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"Schema({', '.join(self.params)})"

    def extend(self, **params: Param) -> Schema:
        """Return a new schema with additional (or overriding) params."""
        return Schema(**{**self.params, **params})

    def wire_name(self, name: str) -> str:
        """Name used for a parameter in the JSON body or query string."""
        return self.params[name].alias or to_camel(name)

    @cached_property
    def model(self) -> type:
        """Strict Pydantic model checking the kind of every declared param.

        Fields are named positionally and aliased to the parameter name so that
        parameter names never clash with BaseModel attributes.
        """
        fields = {
            f"p{index}": (_KIND_TYPES[param.kind], Field(default=None, alias=name))
            for index, (name, param) in enumerate(self.params.items())
        }
        return create_model("ParamsModel", __config__=ConfigDict(strict=True), **fields)

    def validate(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """Validate values and return the wire payload.

        Raises:
            InvalidArgument: On the first missing or mistyped parameter.
        """
        present = {
            name: value
            for name, value in values.items()
            if name in self.params and value is not None
        }

        for name, param in self.params.items():
            if param.required and name not in present:
                raise InvalidArgument(f"Missing required parameter {name}", param=name)

        try:
            self.model.model_validate(present)
        except ValidationError as e:
            name = str(e.errors()[0]["loc"][0])
            expected = self.params[name].kind
            raise InvalidArgument(
                f"Invalid type for parameter {name}: expected {expected}, "
                f"got {kind_of(present[name])}",
                param=name,
                expected=expected,
            ) from None

        payload: dict[str, Any] = {}
        for name, param in self.params.items():
            value = present.get(name, param.default)
            if isinstance(value, Mapping) and not isinstance(value, dict):
                value = dict(value)
            if value is not None:
                payload[self.wire_name(name)] = value
        return payload


def kind_of(value: Any) -> str:
    """Return the schema kind name describing a runtime value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def validate_params(values: Mapping[str, Any], schema: Schema) -> dict[str, Any]:
    """Validate values against schema; see Schema.validate()."""
    return schema.validate(values)


__all__ = ["KINDS", "Param", "Schema", "kind_of", "validate_params"]
