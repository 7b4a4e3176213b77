# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol definitions for external collaborators.

The handler only depends on these interfaces, so tests can run it against
in-memory fakes and production wires in the Firestore adapter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cashentries.firestore.tagged_value import TaggedValue

__all__ = ["ProtocolPendingEntryStore"]


@runtime_checkable
class ProtocolPendingEntryStore(Protocol):
    """Protocol for persisting pending entry documents.

    Each call creates one new document with a store-assigned id. Calls are
    independent: there is no transaction spanning several creates.
    """

    def create(self, collection: str, document: Mapping[str, TaggedValue]) -> str:
        """Create a document in ``collection``.

        Args:
            collection: Destination collection name.
            document: Document fields keyed by wire tag.

        Returns:
            Id of the created document.

        Raises:
            StoreConnectionError: If the store cannot be reached.
            WriteError: If the document could not be written.
        """
        ...
