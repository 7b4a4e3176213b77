# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Handlers for shift document change events."""

from cashentries.handlers.handler_cash_entries import (
    build_pending_entry,
    handle_document_change,
    handle_shift_event,
    validate_content_type,
)

__all__ = [
    "build_pending_entry",
    "handle_document_change",
    "handle_shift_event",
    "validate_content_type",
]
