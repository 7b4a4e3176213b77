# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for FirestorePendingEntryStore.

The Firestore client is replaced by a MagicMock through ``client_factory``;
no network access is needed.
"""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import firestore

from cashentries.errors import StoreConnectionError, WriteError
from cashentries.firestore.tagged_value import (
    ArrayValue,
    BooleanValue,
    DoubleValue,
    GeoPoint,
    GeoPointValue,
    MapValue,
    NullValue,
    StringValue,
    TimestampValue,
)
from cashentries.protocols import ProtocolPendingEntryStore
from cashentries.repositories.firestore_pending_entry_store import (
    FirestorePendingEntryStore,
    to_firestore_native,
)
from cashentries.testing import InMemoryPendingEntryStore

FIXED_TIMESTAMP = datetime(2025, 6, 2, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def client() -> MagicMock:
    mock_client = MagicMock()
    ref = mock_client.collection.return_value.document.return_value
    ref.id = "generated-id"
    return mock_client


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFirestorePendingEntryStoreCreate:
    """Documents are written under auto-generated ids."""

    def test_create_writes_native_values(self, client: MagicMock) -> None:
        store = FirestorePendingEntryStore(client_factory=lambda: client)
        document = {
            "resolved": BooleanValue(False),
            "notes": NullValue(),
            "shift_data": MapValue({"start_time": TimestampValue(FIXED_TIMESTAMP)}),
            "indexes": ArrayValue((StringValue("taxi"), StringValue("t"))),
        }

        document_id = store.create("pending_expense_entries", document)

        assert document_id == "generated-id"
        client.collection.assert_called_once_with("pending_expense_entries")
        ref = client.collection.return_value.document.return_value
        ref.set.assert_called_once_with(
            {
                "resolved": False,
                "notes": None,
                "shift_data": {"start_time": FIXED_TIMESTAMP},
                "indexes": ["taxi", "t"],
            }
        )

    def test_client_created_once(self, client: MagicMock) -> None:
        factory = MagicMock(return_value=client)
        store = FirestorePendingEntryStore(client_factory=factory)

        store.create("c", {"n": DoubleValue(1.0)})
        store.create("c", {"n": DoubleValue(2.0)})

        factory.assert_called_once_with()

    def test_client_not_created_until_first_write(self) -> None:
        factory = MagicMock()

        FirestorePendingEntryStore(client_factory=factory)

        factory.assert_not_called()

    def test_satisfies_protocol(self, client: MagicMock) -> None:
        store = FirestorePendingEntryStore(client_factory=lambda: client)

        assert isinstance(store, ProtocolPendingEntryStore)
        assert isinstance(InMemoryPendingEntryStore(), ProtocolPendingEntryStore)


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFirestorePendingEntryStoreFailures:
    """Client library errors map onto package errors."""

    def test_missing_credentials(self) -> None:
        def factory() -> MagicMock:
            raise auth_exceptions.DefaultCredentialsError("no credentials")

        store = FirestorePendingEntryStore(client_factory=factory)

        with pytest.raises(StoreConnectionError, match="no credentials"):
            store.create("c", {})

    def test_unresolvable_project(self) -> None:
        def factory() -> MagicMock:
            raise OSError("Project was not passed and could not be determined")

        store = FirestorePendingEntryStore(client_factory=factory)

        with pytest.raises(StoreConnectionError):
            store.create("c", {})

    def test_write_rejected(self, client: MagicMock) -> None:
        ref = client.collection.return_value.document.return_value
        ref.set.side_effect = api_exceptions.ServiceUnavailable("backend down")
        store = FirestorePendingEntryStore(client_factory=lambda: client)

        with pytest.raises(WriteError) as exc_info:
            store.create("pending_expense_entries", {"n": DoubleValue(1.0)})

        assert exc_info.value.collection == "pending_expense_entries"
        assert isinstance(exc_info.value.__cause__, api_exceptions.ServiceUnavailable)

    def test_permission_denied_is_write_error(self, client: MagicMock) -> None:
        ref = client.collection.return_value.document.return_value
        ref.set.side_effect = api_exceptions.PermissionDenied("denied")
        store = FirestorePendingEntryStore(client_factory=lambda: client)

        with pytest.raises(WriteError, match="denied"):
            store.create("c", {})


# ---------------------------------------------------------------------------
# Value conversion
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestToFirestoreNative:
    def test_geo_point(self) -> None:
        native = to_firestore_native(GeoPointValue(GeoPoint(19.43, -99.13)))

        assert native == firestore.GeoPoint(19.43, -99.13)

    def test_geo_point_nested(self) -> None:
        value = MapValue(
            {"stops": ArrayValue((GeoPointValue(GeoPoint(1.0, 2.0)),))}
        )

        assert to_firestore_native(value) == {
            "stops": [firestore.GeoPoint(1.0, 2.0)]
        }
