# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Cash entry change detection for Firestore employee shift documents.

Decodes Firestore change events into typed shift records, detects cash
entries added by the change, and files each one as a pending expense entry
with search tokens derived from its description.
"""

from cashentries.change_detector import detect_new_entries
from cashentries.errors import (
    CashEntriesError,
    ContentTypeError,
    DecodeError,
    InvocationCancelledError,
    StoreConnectionError,
    WriteError,
)
from cashentries.handlers import (
    build_pending_entry,
    handle_document_change,
    handle_shift_event,
)
from cashentries.search_index import build_search_index

__version__ = "0.1.0"

__all__ = [
    "CashEntriesError",
    "ContentTypeError",
    "DecodeError",
    "InvocationCancelledError",
    "StoreConnectionError",
    "WriteError",
    "__version__",
    "build_pending_entry",
    "build_search_index",
    "detect_new_entries",
    "handle_document_change",
    "handle_shift_event",
]
