# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Typed document decoder.

Turns a tagged-value document into a record model by interpreting the
model's ``RecordMapping``. The walk is driven by the declared shapes, never
by the data: a document can only fill fields that the mapping names.

Decoding rules:
    - A tag missing from the document leaves the field at its default.
    - ``NullValue`` yields ``None`` for optional fields and the shape's zero
      value otherwise. The inner shape is not validated.
    - Doubles accept integer values (promoted to float).
    - Identifiers must be strings that parse as a UUID.
    - Arrays decode element by element, in order. One bad element fails
      the whole array.
    - Maps decode entry by entry. Entry order carries no meaning.
    - Any variant that does not fit the shape raises ``DecodeError`` with
      the dotted path of the field.

The decoder is pure: it builds a new record and touches nothing else.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from cashentries.errors import DecodeError
from cashentries.firestore.shapes import (
    ArrayShape,
    BooleanShape,
    BytesShape,
    DoubleShape,
    GeoPointShape,
    IdentifierShape,
    IntegerShape,
    MapShape,
    OptionalShape,
    RecordMapping,
    RecordShape,
    Shape,
    StringShape,
    TimestampShape,
)
from cashentries.firestore.tagged_value import (
    ArrayValue,
    BooleanValue,
    BytesValue,
    DoubleValue,
    GeoPointValue,
    IntegerValue,
    MapValue,
    NullValue,
    StringValue,
    TaggedValue,
    TimestampValue,
)

__all__ = ["decode_document"]

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_document(
    document: Mapping[str, TaggedValue], mapping: RecordMapping[ModelT]
) -> ModelT:
    """Decode a tagged-value document into a record.

    Args:
        document: Top-level document fields keyed by wire tag.
        mapping: Field mapping of the target record model.

    Returns:
        A new instance of ``mapping.model``.

    Raises:
        DecodeError: If a value does not fit its declared shape or an
            identifier is malformed.
    """
    return _decode_record(document, mapping, path="")


# ---------------------------------------------------------------------------
# Interpreter
# ---------------------------------------------------------------------------


def _decode_record(
    fields: Mapping[str, TaggedValue], mapping: RecordMapping[ModelT], path: str
) -> ModelT:
    values: dict[str, Any] = {}
    for field_mapping in mapping.fields:
        if field_mapping.tag not in fields:
            continue
        field_path = f"{path}.{field_mapping.tag}" if path else field_mapping.tag
        values[field_mapping.attribute] = _decode_value(
            fields[field_mapping.tag], field_mapping.shape, field_path
        )
    return mapping.model.model_validate(values)


def _decode_value(value: TaggedValue, shape: Shape, path: str) -> Any:
    if isinstance(value, NullValue):
        return shape.zero()

    match shape:
        case OptionalShape(inner=inner):
            return _decode_value(value, inner, path)
        case BooleanShape():
            if isinstance(value, BooleanValue):
                return value.value
        case IntegerShape():
            if isinstance(value, IntegerValue):
                return value.value
        case DoubleShape():
            if isinstance(value, DoubleValue):
                return value.value
            if isinstance(value, IntegerValue):
                return float(value.value)
        case StringShape():
            if isinstance(value, StringValue):
                return value.value
        case TimestampShape():
            if isinstance(value, TimestampValue):
                return value.value
        case BytesShape():
            if isinstance(value, BytesValue):
                return value.value
        case IdentifierShape():
            if isinstance(value, StringValue):
                return _parse_identifier(value.value, path)
        case GeoPointShape():
            if isinstance(value, GeoPointValue):
                return value.value
        case RecordShape(mapping=nested):
            if isinstance(value, MapValue):
                return _decode_record(value.fields, nested, path)
        case ArrayShape(inner=inner):
            if isinstance(value, ArrayValue):
                return tuple(
                    _decode_value(item, inner, f"{path}[{index}]")
                    for index, item in enumerate(value.values)
                )
        case MapShape(inner=inner):
            if isinstance(value, MapValue):
                return {
                    key: _decode_value(item, inner, f"{path}.{key}")
                    for key, item in value.fields.items()
                }
        case _:
            raise TypeError(f"unsupported shape {shape!r} at {path!r}")

    raise DecodeError(
        f"expected {_describe(shape)}, got {value.kind} value", path=path
    )


def _parse_identifier(text: str, path: str) -> uuid.UUID:
    try:
        return uuid.UUID(text)
    except ValueError as exc:
        raise DecodeError(f"invalid UUID {text!r}: {exc}", path=path) from exc


def _describe(shape: Shape) -> str:
    match shape:
        case BooleanShape():
            return "boolean"
        case IntegerShape():
            return "integer"
        case DoubleShape():
            return "double or integer"
        case StringShape():
            return "string"
        case TimestampShape():
            return "timestamp"
        case BytesShape():
            return "bytes"
        case IdentifierShape():
            return "UUID string"
        case GeoPointShape():
            return "geo point"
        case RecordShape():
            return "map for nested record"
        case ArrayShape():
            return "array"
        case MapShape():
            return "map"
    return type(shape).__name__
