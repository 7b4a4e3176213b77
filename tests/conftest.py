"""
Pytest configuration and fixtures for cashentries tests.

Shared fixtures for building Firestore shift documents, both as tagged-value
maps and as serialized DocumentEventData payloads.
"""

from collections.abc import Callable, Iterator, Mapping
from datetime import UTC, datetime
from typing import Any

import pytest

from cashentries.firestore.tagged_value import GeoPoint, TaggedValue, to_tagged
from cashentries.runtime.settings import get_settings

# =========================================================================
# Constants
# =========================================================================

FIXED_SHIFT_START = datetime(2025, 6, 2, 8, 0, 0, tzinfo=UTC)
DOCUMENT_NAME = (
    "projects/test-project/databases/(default)/documents/employee_shifts/shift-001"
)


# =========================================================================
# Settings isolation
# =========================================================================


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep cached settings and CASH_ENTRIES_* variables from leaking between tests."""
    for name in (
        "CASH_ENTRIES_EXPECTED_CONTENT_TYPE",
        "CASH_ENTRIES_PENDING_COLLECTION",
        "CASH_ENTRIES_PROJECT_ID",
        "CASH_ENTRIES_DATABASE",
        "CASH_ENTRIES_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =========================================================================
# Document builders
# =========================================================================


def cash_entry_fields(
    uuid: str = "entry-a",
    value: float = 10.0,
    description: str = "Office Depot Supplies",
    created_at: datetime | None = None,
    expense: bool = True,
    username: str = "maria",
) -> dict[str, Any]:
    """Plain-Python fields of one cash entry, keyed by wire tag."""
    return {
        "created_at": created_at or datetime(2025, 6, 2, 9, 30, tzinfo=UTC),
        "description": description,
        "expense": expense,
        "username": username,
        "uuid": uuid,
        "value": value,
    }


def shift_fields(entries: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """Plain-Python fields of one employee shift, keyed by wire tag."""
    return {
        "uuid": "shift-001",
        "created_at": FIXED_SHIFT_START,
        "username": "maria",
        "branch_uuid": "branch-042",
        "cash_entries": entries if entries is not None else [],
    }


def tagged_document(fields: Mapping[str, Any]) -> dict[str, TaggedValue]:
    """Convert plain-Python document fields into tagged values."""
    return {key: to_tagged(value) for key, value in fields.items()}


@pytest.fixture
def make_entry() -> Callable[..., dict[str, Any]]:
    return cash_entry_fields


@pytest.fixture
def make_shift() -> Callable[..., dict[str, Any]]:
    return shift_fields


@pytest.fixture
def make_tagged() -> Callable[[Mapping[str, Any]], dict[str, TaggedValue]]:
    return tagged_document


# =========================================================================
# Protobuf payloads
# =========================================================================


def _set_proto_value(value_pb: Any, obj: Any) -> None:
    if obj is None:
        value_pb.null_value = 0
    elif isinstance(obj, bool):
        value_pb.boolean_value = obj
    elif isinstance(obj, int):
        value_pb.integer_value = obj
    elif isinstance(obj, float):
        value_pb.double_value = obj
    elif isinstance(obj, str):
        value_pb.string_value = obj
    elif isinstance(obj, bytes):
        value_pb.bytes_value = obj
    elif isinstance(obj, datetime):
        value_pb.timestamp_value.FromDatetime(obj)
    elif isinstance(obj, GeoPoint):
        value_pb.geo_point_value.latitude = obj.latitude
        value_pb.geo_point_value.longitude = obj.longitude
    elif isinstance(obj, list):
        value_pb.array_value.SetInParent()
        for item in obj:
            _set_proto_value(value_pb.array_value.values.add(), item)
    elif isinstance(obj, dict):
        value_pb.map_value.SetInParent()
        _fill_proto_fields(value_pb.map_value.fields, obj)
    else:
        raise TypeError(f"unsupported test value {obj!r}")


def _fill_proto_fields(fields_pb: Any, fields: Mapping[str, Any]) -> None:
    for key, obj in fields.items():
        _set_proto_value(fields_pb[key], obj)


def document_event_payload(
    old: Mapping[str, Any] | None = None,
    new: Mapping[str, Any] | None = None,
) -> bytes:
    """Serialize a DocumentEventData message with the given snapshots."""
    from google.events.cloud import firestore as firestore_events

    message = firestore_events.DocumentEventData.pb()()
    if old is not None:
        message.old_value.SetInParent()
        message.old_value.name = DOCUMENT_NAME
        _fill_proto_fields(message.old_value.fields, old)
    if new is not None:
        message.value.SetInParent()
        message.value.name = DOCUMENT_NAME
        _fill_proto_fields(message.value.fields, new)
    return message.SerializeToString()


@pytest.fixture
def make_event_payload() -> Callable[..., bytes]:
    """Build serialized DocumentEventData payloads from plain-Python snapshots."""
    return document_event_payload
