# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Persistence adapters."""

from cashentries.repositories.firestore_pending_entry_store import (
    FirestorePendingEntryStore,
    to_firestore_native,
)

__all__ = ["FirestorePendingEntryStore", "to_firestore_native"]
