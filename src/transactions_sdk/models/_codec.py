# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

"""Pydantic base models for the wire contracts.

Response models subclass :class:`WireModel`: they read the server's keys,
keep unknown keys and report issue paths by wire key. Request and query
models subclass :class:`RequestModel`: they accept attribute names (or wire
keys), reject unknown keys and report issue paths by attribute name.

Responses serialize with ``model_dump(mode="json", by_alias=True,
exclude_unset=True)``. ``None`` and ``UNSET`` inputs to a request model are
dropped before validation, so optional fields left out stay unset and never
reach the wire.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    WrapSerializer,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from ..errors import ValidationError, ValidationIssue
from ..types import UNSET, Unset

T = TypeVar("T", bound="WireModel")


class WireModel(BaseModel):
    """Base class for response models."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e, f"Invalid {type(self).__name__}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        return decode(cls, src_dict)

    @classmethod
    def from_input(cls: type[T], data: T | Mapping[str, Any]) -> T:
        return build_model(cls, data, f"Invalid {cls.__name__}")

    @property
    def additional_properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties


class RequestModel(WireModel):
    """Base class for request bodies and query parameters."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", loc_by_alias=False)

    @model_validator(mode="before")
    @classmethod
    def drop_absent_values(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {
                key: value
                for key, value in data.items()
                if value is not None and not isinstance(value, Unset)
            }
        return data

    def to_dict(self) -> dict[str, Any]:
        # Fields left out are None here; declared defaults such as ``active=True`` are sent.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def require_any(model: BaseModel, *names: str) -> None:
    """Fail unless at least one of ``names`` was given to ``model``."""
    if not model.model_fields_set.intersection(names):
        raise PydanticCustomError("custom", "At least one field must be provided for update")


def require_one(model: BaseModel, first: str, second: str, message: str) -> None:
    """Fail unless exactly one of ``first`` and ``second`` was given to ``model``."""
    given = model.model_fields_set
    if (first in given) == (second in given):
        raise PydanticCustomError("custom", message)


def _json_text(value: str) -> str:
    try:
        json.loads(value)
    except ValueError as e:
        raise PydanticCustomError("invalid_string", "must be a valid JSON string") from e
    return value


def _load_json_list(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if not value.strip():
        return []
    try:
        return json.loads(value)
    except ValueError as e:
        raise PydanticCustomError("invalid_string", "must be a valid JSON string") from e


def _dump_json(value: Any, handler: SerializerFunctionWrapHandler) -> str:
    return json.dumps(handler(value), separators=(",", ":"))


# A string that must hold a JSON document; it is sent unchanged.
JsonText = AfterValidator(_json_text)
# A list carried on the wire as a JSON string; an empty string reads as ``[]``.
JsonList = BeforeValidator(_load_json_list)
# Serialize the field's value as a compact JSON string.
JsonEncoded = WrapSerializer(_dump_json, when_used="json")


def build_model(cls: type[T], data: T | Mapping[str, Any], message: str = "Invalid request") -> T:
    """Coerce caller input, a model instance or a mapping keyed by field name, into ``cls``."""
    if isinstance(data, cls):
        return data
    if not isinstance(data, Mapping):
        issue = ValidationIssue(
            (), f"expected {cls.__name__} or mapping, got {type(data).__name__}", "invalid_type"
        )
        raise ValidationError(message, [issue])
    try:
        return cls.model_validate(dict(data))
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, message) from e


@lru_cache(maxsize=None)
def _adapter(contract: Any) -> TypeAdapter[Any]:
    return TypeAdapter(contract)


def decode(contract: Any, value: Any, message: str = "Response failed validation") -> Any:
    """Validate ``value`` against ``contract`` (a model class or a type such as ``list[Role]``)."""
    try:
        return _adapter(contract).validate_python(value)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, message) from e


def encode(model: WireModel) -> dict[str, Any]:
    return model.to_dict()


__all__ = [
    "UNSET",
    "JsonEncoded",
    "JsonList",
    "JsonText",
    "RequestModel",
    "WireModel",
    "build_model",
    "decode",
    "encode",
    "require_any",
    "require_one",
]
