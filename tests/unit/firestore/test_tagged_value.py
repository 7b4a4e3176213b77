# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for tagged value conversion helpers."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from cashentries.firestore.tagged_value import (
    ArrayValue,
    BooleanValue,
    BytesValue,
    DoubleValue,
    EnumValueKind,
    GeoPoint,
    GeoPointValue,
    IntegerValue,
    MapValue,
    NullValue,
    StringValue,
    TimestampValue,
    to_native,
    to_tagged,
)


@pytest.mark.unit
class TestToTagged:
    """Plain Python values map onto a single variant."""

    @pytest.mark.parametrize(
        ("obj", "expected"),
        [
            (None, NullValue()),
            (True, BooleanValue(True)),
            (3, IntegerValue(3)),
            (2.5, DoubleValue(2.5)),
            ("abc", StringValue("abc")),
            (b"\x01", BytesValue(b"\x01")),
            (GeoPoint(1.0, 2.0), GeoPointValue(GeoPoint(1.0, 2.0))),
        ],
    )
    def test_scalars(self, obj: object, expected: object) -> None:
        assert to_tagged(obj) == expected

    def test_bool_is_not_integer(self) -> None:
        assert to_tagged(False).kind is EnumValueKind.BOOLEAN

    def test_naive_datetime_taken_as_utc(self) -> None:
        tagged = to_tagged(datetime(2025, 1, 1, 8, 0))

        assert tagged == TimestampValue(datetime(2025, 1, 1, 8, 0, tzinfo=UTC))

    def test_nested_containers(self) -> None:
        tagged = to_tagged({"items": [1, {"k": None}]})

        assert tagged == MapValue(
            {"items": ArrayValue((IntegerValue(1), MapValue({"k": NullValue()})))}
        )

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="no tagged value for set"):
            to_tagged({1, 2})


@pytest.mark.unit
class TestToNative:
    """Tagged values unwrap into plain Python values."""

    def test_nested_round_trip(self) -> None:
        native = {
            "name": "x",
            "n": 1,
            "when": datetime(2025, 1, 1, tzinfo=UTC),
            "list": [True, None, 1.5],
        }

        assert to_native(to_tagged(native)) == native

    def test_rejects_non_tagged(self) -> None:
        with pytest.raises(TypeError, match="not a tagged value"):
            to_native("plain string")
