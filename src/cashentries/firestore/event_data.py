# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Firestore document change payloads.

Firestore delivers document triggers as CloudEvents whose data is a
serialized ``google.events.cloud.firestore.v1.DocumentEventData`` message
holding the previous (``old_value``) and current (``value``) document.
``parse_document_event`` turns that payload into a ``DocumentChange`` of
tagged-value maps; everything downstream works on tagged values only.

Presence matters:
    - ``old_value`` unset: the document was just created.
    - ``value`` unset: the document was deleted.

Firestore reference values have no tagged variant of their own and are
carried as strings holding the document path.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC
from typing import Any

from google.events.cloud import firestore
from google.protobuf.message import DecodeError as ProtobufDecodeError

from cashentries.errors import DecodeError
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
    TaggedDocument,
    TaggedValue,
    TimestampValue,
)

__all__ = [
    "DocumentChange",
    "parse_document_event",
    "tagged_from_proto",
]


@dataclass(frozen=True)
class DocumentChange:
    """Before and after snapshots of one document.

    Attributes:
        old_fields: Fields before the change, or ``None`` if the document
            did not exist.
        new_fields: Fields after the change, or ``None`` if the document
            was deleted.
        document_name: Full resource name of the document, when known.
    """

    old_fields: TaggedDocument | None
    new_fields: TaggedDocument | None
    document_name: str = ""

    @property
    def is_delete(self) -> bool:
        return self.new_fields is None

    @property
    def is_create(self) -> bool:
        return self.old_fields is None


def parse_document_event(payload: bytes) -> DocumentChange:
    """Parse a serialized ``DocumentEventData`` message.

    Args:
        payload: Raw CloudEvent data.

    Returns:
        The before/after snapshots as tagged-value maps.

    Raises:
        DecodeError: If the payload is not a valid message.
    """
    message = firestore.DocumentEventData.pb()()
    try:
        message.ParseFromString(payload)
    except ProtobufDecodeError as exc:
        raise DecodeError(f"invalid DocumentEventData payload: {exc}") from exc

    old_fields = None
    new_fields = None
    document_name = ""
    if message.HasField("old_value"):
        old_fields = _fields_from_proto(message.old_value.fields)
        document_name = message.old_value.name
    if message.HasField("value"):
        new_fields = _fields_from_proto(message.value.fields)
        document_name = message.value.name
    return DocumentChange(
        old_fields=old_fields, new_fields=new_fields, document_name=document_name
    )


def tagged_from_proto(value: Any) -> TaggedValue:
    """Convert one raw protobuf ``firestore.v1.Value`` into a tagged value.

    Raises:
        DecodeError: If no variant is set on the message.
    """
    variant = value.WhichOneof("value_type")
    match variant:
        case "null_value":
            return NullValue()
        case "boolean_value":
            return BooleanValue(value.boolean_value)
        case "integer_value":
            return IntegerValue(value.integer_value)
        case "double_value":
            return DoubleValue(value.double_value)
        case "string_value":
            return StringValue(value.string_value)
        case "reference_value":
            return StringValue(value.reference_value)
        case "bytes_value":
            return BytesValue(value.bytes_value)
        case "timestamp_value":
            return TimestampValue(value.timestamp_value.ToDatetime(tzinfo=UTC))
        case "geo_point_value":
            return GeoPointValue(
                GeoPoint(
                    latitude=value.geo_point_value.latitude,
                    longitude=value.geo_point_value.longitude,
                )
            )
        case "array_value":
            return ArrayValue(
                tuple(tagged_from_proto(item) for item in value.array_value.values)
            )
        case "map_value":
            return MapValue(_fields_from_proto(value.map_value.fields))
    raise DecodeError(f"value has no variant set ({variant!r})")


def _fields_from_proto(fields: Mapping[str, Any]) -> dict[str, TaggedValue]:
    return {key: tagged_from_proto(item) for key, item in fields.items()}
