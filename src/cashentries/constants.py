# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Shared constants for cash entry change detection.

Usage:
    from cashentries.constants import PENDING_ENTRIES_COLLECTION
"""

# =============================================================================
# Event Envelope
# =============================================================================

PROTOBUF_CONTENT_TYPE: str = "application/protobuf"
"""
Content type of Firestore document trigger payloads.

Events declaring any other content type are rejected before decoding.
"""

# =============================================================================
# Destination Collection
# =============================================================================

PENDING_ENTRIES_COLLECTION: str = "pending_expense_entries"
"""Collection that receives one document per newly detected cash entry."""

# =============================================================================
# Search Index Limits
# =============================================================================

MAX_INDEX_TOKENS: int = 35
"""
Maximum number of index tokens produced from word and prefix emission.

The trailing whole-phrase token is appended after the cap is applied and
may take the total to MAX_INDEX_TOKENS + 1.
"""

PREFIX_CEILINGS: tuple[int, ...] = (10, 5, 3)
"""
Longest prefix emitted per word position.

Position 0 gets up to 10 characters, position 1 up to 5, and every later
position reuses the last ceiling (3).
"""

MIN_PREFIXED_WORD_LENGTH: int = 3
"""Non-leading words shorter than this contribute only the whole word."""
