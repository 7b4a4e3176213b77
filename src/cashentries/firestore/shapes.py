# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Field shapes and record mappings.

A ``RecordMapping`` is the static declaration that links each attribute of
a record model to the wire tag it is stored under and to the shape its
value takes. The decoder and the encoder both interpret the same mapping,
so the tag names used to read a document are the ones used to write one.

Shapes:
    BOOLEAN, INTEGER, DOUBLE, STRING: plain scalars.
    TIMESTAMP: timezone-aware UTC ``datetime``.
    BYTES: ``bytes``.
    IDENTIFIER: ``uuid.UUID`` carried on the wire as a string.
    GEO_POINT: ``GeoPoint`` (latitude, longitude).
    RecordShape(mapping): nested record, carried as a map.
    OptionalShape(inner): ``inner`` or ``None``.
    ArrayShape(inner): ``tuple`` of ``inner``.
    MapShape(inner): ``dict`` of string to ``inner``.

Every shape has a zero value, used when a document holds an explicit null
for a non-optional field.

Example:
    >>> CASH_ENTRY_MAPPING = RecordMapping(
    ...     model=ModelCashEntry,
    ...     fields=(
    ...         FieldMapping("created_at", "created_at", TIMESTAMP),
    ...         FieldMapping("value", "value", DOUBLE),
    ...     ),
    ... )
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from cashentries.firestore.tagged_value import GeoPoint

__all__ = [
    "BOOLEAN",
    "BYTES",
    "DOUBLE",
    "GEO_POINT",
    "IDENTIFIER",
    "INTEGER",
    "STRING",
    "TIMESTAMP",
    "ZERO_TIMESTAMP",
    "ArrayShape",
    "BooleanShape",
    "BytesShape",
    "DoubleShape",
    "FieldMapping",
    "GeoPointShape",
    "IdentifierShape",
    "IntegerShape",
    "MapShape",
    "OptionalShape",
    "RecordMapping",
    "RecordShape",
    "Shape",
    "StringShape",
    "TimestampShape",
]

ModelT = TypeVar("ModelT", bound=BaseModel)

ZERO_TIMESTAMP = datetime(1970, 1, 1, tzinfo=UTC)
"""Zero value of a timestamp field: the Unix epoch."""


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------


class Shape:
    """Base class for field shapes."""

    __slots__ = ()

    def zero(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class BooleanShape(Shape):
    def zero(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class IntegerShape(Shape):
    def zero(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class DoubleShape(Shape):
    def zero(self) -> float:
        return 0.0


@dataclass(frozen=True, slots=True)
class StringShape(Shape):
    def zero(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class TimestampShape(Shape):
    def zero(self) -> datetime:
        return ZERO_TIMESTAMP


@dataclass(frozen=True, slots=True)
class BytesShape(Shape):
    def zero(self) -> bytes:
        return b""


@dataclass(frozen=True, slots=True)
class IdentifierShape(Shape):
    def zero(self) -> uuid.UUID:
        return uuid.UUID(int=0)


@dataclass(frozen=True, slots=True)
class GeoPointShape(Shape):
    def zero(self) -> GeoPoint:
        return GeoPoint()


@dataclass(frozen=True, slots=True)
class RecordShape(Shape):
    mapping: RecordMapping[Any]

    def zero(self) -> BaseModel:
        return self.mapping.model()


@dataclass(frozen=True, slots=True)
class OptionalShape(Shape):
    inner: Shape

    def zero(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class ArrayShape(Shape):
    inner: Shape

    def zero(self) -> tuple[Any, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class MapShape(Shape):
    inner: Shape

    def zero(self) -> dict[str, Any]:
        return {}


BOOLEAN = BooleanShape()
INTEGER = IntegerShape()
DOUBLE = DoubleShape()
STRING = StringShape()
TIMESTAMP = TimestampShape()
BYTES = BytesShape()
IDENTIFIER = IdentifierShape()
GEO_POINT = GeoPointShape()


# ---------------------------------------------------------------------------
# Mappings
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FieldMapping:
    """One record attribute, the wire tag it lives under, and its shape."""

    attribute: str
    tag: str
    shape: Shape


@dataclass(frozen=True)
class RecordMapping(Generic[ModelT]):
    """Field mappings for one record model.

    Checked when declared: every attribute must be a field of ``model``
    and neither attributes nor tags may repeat. Model fields left out of
    the mapping are never read from or written to documents.

    Raises:
        ValueError: If the declaration is inconsistent with ``model``.
    """

    model: type[ModelT]
    fields: tuple[FieldMapping, ...]

    def __post_init__(self) -> None:
        known = self.model.model_fields
        seen_attributes: set[str] = set()
        seen_tags: set[str] = set()
        for field_mapping in self.fields:
            if field_mapping.attribute not in known:
                raise ValueError(
                    f"{self.model.__name__} has no field "
                    f"{field_mapping.attribute!r}"
                )
            if field_mapping.attribute in seen_attributes:
                raise ValueError(
                    f"{self.model.__name__}.{field_mapping.attribute} mapped twice"
                )
            if field_mapping.tag in seen_tags:
                raise ValueError(
                    f"tag {field_mapping.tag!r} declared twice for "
                    f"{self.model.__name__}"
                )
            seen_attributes.add(field_mapping.attribute)
            seen_tags.add(field_mapping.tag)
