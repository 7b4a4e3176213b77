# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""New cash entry detection.

Compares the cash entries of a shift before and after a change and
returns the entries that are new. An entry counts as existing only if an
entry with every field equal is present before the change; position in the
sequence is ignored. Editing any field of an entry therefore makes the
edited version count as new.

The comparison is quadratic in the number of entries, which is bounded by
what one shift logs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

__all__ = ["detect_new_entries"]

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT")


def detect_new_entries(before: Sequence[EntryT], after: Sequence[EntryT]) -> list[EntryT]:
    """Return the entries of ``after`` with no equal entry in ``before``.

    Args:
        before: Entries prior to the change. Pass an empty sequence when the
            document did not exist before.
        after: Entries after the change.

    Returns:
        New entries in the order they appear in ``after``.
    """
    new_entries = [
        entry
        for entry in after
        if not any(entry == previous for previous in before)
    ]
    logger.debug(
        "Change detection: %d of %d entries are new (before=%d)",
        len(new_entries),
        len(after),
        len(before),
    )
    return new_entries
