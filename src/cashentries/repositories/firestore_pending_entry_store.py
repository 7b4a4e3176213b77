# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Firestore implementation of ProtocolPendingEntryStore.

The client is created lazily on the first write and reused for the life of
the store. Tagged values are unwrapped into the Python types the Firestore
client serializes natively; geo points become ``firestore.GeoPoint``.

Failure mapping:
    - Client creation fails (credentials, project resolution):
      ``StoreConnectionError``.
    - ``DocumentReference.set`` fails: ``WriteError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import firestore

from cashentries.errors import StoreConnectionError, WriteError
from cashentries.firestore.tagged_value import (
    ArrayValue,
    GeoPointValue,
    MapValue,
    TaggedValue,
    to_native,
)

__all__ = ["FirestorePendingEntryStore", "to_firestore_native"]

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], Any]


class FirestorePendingEntryStore:
    """Writes pending entry documents with the Firestore client library.

    Args:
        project_id: Google Cloud project. ``None`` lets the client resolve it
            from the environment.
        database: Firestore database id. ``None`` uses the default database.
        client_factory: Override for client construction, used by tests.
    """

    def __init__(
        self,
        *,
        project_id: str | None = None,
        database: str | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._project_id = project_id
        self._database = database
        self._client_factory = client_factory or self._default_client
        self._client: Any = None

    def create(self, collection: str, document: Mapping[str, TaggedValue]) -> str:
        """Create ``document`` under a new auto-generated id in ``collection``."""
        client = self._get_client()
        data = {key: to_firestore_native(value) for key, value in document.items()}
        ref = client.collection(collection).document()
        try:
            ref.set(data)
        except api_exceptions.GoogleAPIError as exc:
            raise WriteError(
                f"failed to create document in {collection!r}: {exc}",
                collection=collection,
            ) from exc
        logger.debug("Created document %s/%s", collection, ref.id)
        return str(ref.id)

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    def _get_client(self) -> Any:
        if self._client is None:
            try:
                self._client = self._client_factory()
            except (
                auth_exceptions.GoogleAuthError,
                api_exceptions.GoogleAPIError,
                OSError,  # raised when no project can be resolved
            ) as exc:
                raise StoreConnectionError(
                    f"failed to connect to Firestore: {exc}"
                ) from exc
            logger.info(
                "Connected to Firestore. project=%s database=%s",
                self._project_id or "<default>",
                self._database or "<default>",
            )
        return self._client

    def _default_client(self) -> firestore.Client:
        kwargs: dict[str, str] = {}
        if self._project_id is not None:
            kwargs["project"] = self._project_id
        if self._database is not None:
            kwargs["database"] = self._database
        return firestore.Client(**kwargs)


def to_firestore_native(value: TaggedValue) -> Any:
    """Unwrap a tagged value into a type the Firestore client can write."""
    match value:
        case GeoPointValue(value=point):
            return firestore.GeoPoint(point.latitude, point.longitude)
        case ArrayValue(values=values):
            return [to_firestore_native(item) for item in values]
        case MapValue(fields=fields):
            return {key: to_firestore_native(item) for key, item in fields.items()}
    return to_native(value)
