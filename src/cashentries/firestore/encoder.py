# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Typed document encoder, the inverse of the decoder.

Walks the same ``RecordMapping`` used for decoding and produces the
tagged-value document a record is stored as. Identifiers are written in
their canonical lowercase hyphenated form.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel

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
    GeoPoint,
    GeoPointValue,
    IntegerValue,
    MapValue,
    NullValue,
    StringValue,
    TaggedValue,
    TimestampValue,
)

__all__ = ["encode_record"]


def encode_record(
    record: BaseModel, mapping: RecordMapping[Any]
) -> dict[str, TaggedValue]:
    """Encode a record as a tagged-value document keyed by wire tag.

    Raises:
        TypeError: If ``record`` is not an instance of ``mapping.model`` or
            an attribute holds a value its shape cannot carry.
    """
    if not isinstance(record, mapping.model):
        raise TypeError(
            f"expected {mapping.model.__name__}, got {type(record).__name__}"
        )
    return {
        field_mapping.tag: _encode_value(
            getattr(record, field_mapping.attribute),
            field_mapping.shape,
            field_mapping.tag,
        )
        for field_mapping in mapping.fields
    }


def _encode_value(obj: Any, shape: Shape, path: str) -> TaggedValue:
    match shape:
        case OptionalShape(inner=inner):
            if obj is None:
                return NullValue()
            return _encode_value(obj, inner, path)
        case BooleanShape() if isinstance(obj, bool):
            return BooleanValue(obj)
        case IntegerShape() if isinstance(obj, int) and not isinstance(obj, bool):
            return IntegerValue(obj)
        case DoubleShape() if isinstance(obj, int | float) and not isinstance(obj, bool):
            return DoubleValue(float(obj))
        case StringShape() if isinstance(obj, str):
            return StringValue(obj)
        case TimestampShape() if isinstance(obj, datetime):
            if obj.tzinfo is None:
                obj = obj.replace(tzinfo=UTC)
            return TimestampValue(obj)
        case BytesShape() if isinstance(obj, bytes):
            return BytesValue(obj)
        case IdentifierShape() if isinstance(obj, uuid.UUID):
            return StringValue(str(obj))
        case GeoPointShape() if isinstance(obj, GeoPoint):
            return GeoPointValue(obj)
        case RecordShape(mapping=nested) if isinstance(obj, BaseModel):
            return MapValue(encode_record(obj, nested))
        case ArrayShape(inner=inner) if isinstance(obj, list | tuple):
            return ArrayValue(
                tuple(
                    _encode_value(item, inner, f"{path}[{index}]")
                    for index, item in enumerate(obj)
                )
            )
        case MapShape(inner=inner) if isinstance(obj, Mapping):
            return MapValue(
                {
                    str(key): _encode_value(item, inner, f"{path}.{key}")
                    for key, item in obj.items()
                }
            )
    raise TypeError(
        f"cannot encode {type(obj).__name__} as {type(shape).__name__} at {path!r}"
    )
