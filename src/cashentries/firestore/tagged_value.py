# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Firestore tagged values.

A tagged value is one field of a Firestore document as it travels on the
wire: exactly one variant out of null, boolean, integer, double, string,
bytes, timestamp, geo point, array and map. Each variant is its own frozen
class and ``TaggedValue`` is their closed union, so consumers handle every
case with a ``match`` statement.

A key missing from a ``MapValue`` means "not present" and is distinct from
a key holding ``NullValue``.

``to_tagged`` and ``to_native`` convert between tagged values and plain
Python objects (``None``, ``bool``, ``int``, ``float``, ``str``,
``bytes``, ``datetime``, ``GeoPoint``, ``list``, ``dict``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, ClassVar

__all__ = [
    "ArrayValue",
    "BooleanValue",
    "BytesValue",
    "DoubleValue",
    "EnumValueKind",
    "GeoPoint",
    "GeoPointValue",
    "IntegerValue",
    "MapValue",
    "NullValue",
    "StringValue",
    "TaggedDocument",
    "TaggedValue",
    "TimestampValue",
    "to_native",
    "to_tagged",
]


class EnumValueKind(StrEnum):
    """Variant names, used in error messages and logs."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    BYTES = "bytes"
    TIMESTAMP = "timestamp"
    GEO_POINT = "geo_point"
    ARRAY = "array"
    MAP = "map"


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in degrees."""

    latitude: float = 0.0
    longitude: float = 0.0


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NullValue:
    kind: ClassVar[EnumValueKind] = EnumValueKind.NULL


@dataclass(frozen=True, slots=True)
class BooleanValue:
    value: bool
    kind: ClassVar[EnumValueKind] = EnumValueKind.BOOLEAN


@dataclass(frozen=True, slots=True)
class IntegerValue:
    value: int
    kind: ClassVar[EnumValueKind] = EnumValueKind.INTEGER


@dataclass(frozen=True, slots=True)
class DoubleValue:
    value: float
    kind: ClassVar[EnumValueKind] = EnumValueKind.DOUBLE


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str
    kind: ClassVar[EnumValueKind] = EnumValueKind.STRING


@dataclass(frozen=True, slots=True)
class BytesValue:
    value: bytes
    kind: ClassVar[EnumValueKind] = EnumValueKind.BYTES


@dataclass(frozen=True, slots=True)
class TimestampValue:
    value: datetime
    kind: ClassVar[EnumValueKind] = EnumValueKind.TIMESTAMP


@dataclass(frozen=True, slots=True)
class GeoPointValue:
    value: GeoPoint
    kind: ClassVar[EnumValueKind] = EnumValueKind.GEO_POINT


@dataclass(frozen=True, slots=True)
class ArrayValue:
    values: tuple[TaggedValue, ...] = ()
    kind: ClassVar[EnumValueKind] = EnumValueKind.ARRAY


@dataclass(frozen=True, slots=True)
class MapValue:
    fields: Mapping[str, TaggedValue] = field(default_factory=dict)
    kind: ClassVar[EnumValueKind] = EnumValueKind.MAP


TaggedValue = (
    NullValue
    | BooleanValue
    | IntegerValue
    | DoubleValue
    | StringValue
    | BytesValue
    | TimestampValue
    | GeoPointValue
    | ArrayValue
    | MapValue
)

TaggedDocument = Mapping[str, TaggedValue]
"""Top-level fields of one document, keyed by wire tag."""


# ---------------------------------------------------------------------------
# Conversion to and from plain Python values
# ---------------------------------------------------------------------------


def to_tagged(obj: Any) -> TaggedValue:
    """Wrap a plain Python value in the matching tagged variant.

    Naive datetimes are taken to be UTC.

    Raises:
        TypeError: If ``obj`` has no tagged-value equivalent.
    """
    # bool before int: bool is an int subclass
    if obj is None:
        return NullValue()
    if isinstance(obj, bool):
        return BooleanValue(obj)
    if isinstance(obj, int):
        return IntegerValue(obj)
    if isinstance(obj, float):
        return DoubleValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, bytes | bytearray):
        return BytesValue(bytes(obj))
    if isinstance(obj, datetime):
        if obj.tzinfo is None:
            obj = obj.replace(tzinfo=UTC)
        return TimestampValue(obj)
    if isinstance(obj, GeoPoint):
        return GeoPointValue(obj)
    if isinstance(obj, list | tuple):
        return ArrayValue(tuple(to_tagged(item) for item in obj))
    if isinstance(obj, Mapping):
        return MapValue({str(key): to_tagged(item) for key, item in obj.items()})
    raise TypeError(f"no tagged value for {type(obj).__name__}")


def to_native(value: TaggedValue) -> Any:
    """Unwrap a tagged value into plain Python values (arrays become lists)."""
    match value:
        case NullValue():
            return None
        case (
            BooleanValue(value=inner)
            | IntegerValue(value=inner)
            | DoubleValue(value=inner)
            | StringValue(value=inner)
            | BytesValue(value=inner)
            | TimestampValue(value=inner)
            | GeoPointValue(value=inner)
        ):
            return inner
        case ArrayValue(values=values):
            return [to_native(item) for item in values]
        case MapValue(fields=fields):
            return {key: to_native(item) for key, item in fields.items()}
    raise TypeError(f"not a tagged value: {value!r}")
