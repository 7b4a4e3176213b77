# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Firestore tagged values and the typed decoder/encoder built on them."""

from cashentries.firestore.decoder import decode_document
from cashentries.firestore.encoder import encode_record
from cashentries.firestore.shapes import (
    BOOLEAN,
    BYTES,
    DOUBLE,
    GEO_POINT,
    IDENTIFIER,
    INTEGER,
    STRING,
    TIMESTAMP,
    ZERO_TIMESTAMP,
    ArrayShape,
    FieldMapping,
    MapShape,
    OptionalShape,
    RecordMapping,
    RecordShape,
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
    TaggedDocument,
    TaggedValue,
    TimestampValue,
    to_native,
    to_tagged,
)

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
    "ArrayValue",
    "BooleanValue",
    "BytesValue",
    "DoubleValue",
    "FieldMapping",
    "GeoPoint",
    "GeoPointValue",
    "IntegerValue",
    "MapShape",
    "MapValue",
    "NullValue",
    "OptionalShape",
    "RecordMapping",
    "RecordShape",
    "StringValue",
    "TaggedDocument",
    "TaggedValue",
    "TimestampValue",
    "decode_document",
    "encode_record",
    "to_native",
    "to_tagged",
]
