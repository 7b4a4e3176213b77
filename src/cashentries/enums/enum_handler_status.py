# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Outcome of one cash entry change invocation."""

from enum import StrEnum


class EnumHandlerStatus(StrEnum):
    """Outcome of handling one shift document change.

    Values:
        SKIPPED_DELETED: The document was deleted; nothing to do.
        NO_CHANGES: No cash entry was added.
        ENTRIES_CREATED: At least one pending entry was written.
    """

    SKIPPED_DELETED = "skipped_deleted"
    NO_CHANGES = "no_changes"
    ENTRIES_CREATED = "entries_created"


__all__ = ["EnumHandlerStatus"]
