# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pending expense entry awaiting human resolution.

One pending entry is written for every cash entry that appears in a shift
document. It carries a copy of the entry, denormalized shift metadata, the
resolution state (always unresolved on creation) and the search tokens of
the entry description.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cashentries.firestore.shapes import (
    BOOLEAN,
    STRING,
    TIMESTAMP,
    ZERO_TIMESTAMP,
    ArrayShape,
    FieldMapping,
    OptionalShape,
    RecordMapping,
    RecordShape,
)
from cashentries.models.model_cash_entry import CASH_ENTRY_MAPPING, ModelCashEntry

__all__ = [
    "PENDING_ENTRY_MAPPING",
    "SHIFT_DATA_MAPPING",
    "ModelPendingEntry",
    "ModelShiftData",
]


class ModelShiftData(BaseModel):
    """Shift metadata copied onto a pending entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    uuid: str = Field(default="")
    start_time: datetime = Field(default=ZERO_TIMESTAMP)
    main_shift_user: str = Field(default="")


class ModelPendingEntry(BaseModel):
    """A newly detected cash entry filed for review.

    Attributes:
        cash_entry: The detected entry, unchanged.
        branch_uuid: Branch of the shift the entry came from.
        resolved: Whether a reviewer has resolved the entry.
        resolved_by: Reviewer, once resolved.
        resolved_at: Resolution time, once resolved.
        notes: Reviewer notes.
        shift_data: Shift the entry was logged in.
        indexes: Search tokens derived from the entry description.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cash_entry: ModelCashEntry = Field(default_factory=ModelCashEntry)
    branch_uuid: str = Field(default="")
    resolved: bool = Field(default=False)
    resolved_by: str | None = Field(default=None)
    resolved_at: datetime | None = Field(default=None)
    notes: str | None = Field(default=None)
    shift_data: ModelShiftData = Field(default_factory=ModelShiftData)
    indexes: tuple[str, ...] = Field(default=())


SHIFT_DATA_MAPPING: RecordMapping[ModelShiftData] = RecordMapping(
    model=ModelShiftData,
    fields=(
        FieldMapping("uuid", "uuid", STRING),
        FieldMapping("start_time", "start_time", TIMESTAMP),
        FieldMapping("main_shift_user", "main_shift_user", STRING),
    ),
)

PENDING_ENTRY_MAPPING: RecordMapping[ModelPendingEntry] = RecordMapping(
    model=ModelPendingEntry,
    fields=(
        FieldMapping("cash_entry", "cash_entry", RecordShape(CASH_ENTRY_MAPPING)),
        FieldMapping("branch_uuid", "branch_uuid", STRING),
        FieldMapping("resolved", "resolved", BOOLEAN),
        FieldMapping("resolved_by", "resolved_by", OptionalShape(STRING)),
        FieldMapping("resolved_at", "resolved_at", OptionalShape(TIMESTAMP)),
        FieldMapping("notes", "notes", OptionalShape(STRING)),
        FieldMapping("shift_data", "shift_data", RecordShape(SHIFT_DATA_MAPPING)),
        FieldMapping("indexes", "indexes", ArrayShape(STRING)),
    ),
)
