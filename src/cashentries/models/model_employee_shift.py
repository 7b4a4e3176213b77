# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Employee shift document, the source of change events."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cashentries.firestore.shapes import (
    STRING,
    TIMESTAMP,
    ZERO_TIMESTAMP,
    ArrayShape,
    FieldMapping,
    RecordMapping,
    RecordShape,
)
from cashentries.models.model_cash_entry import CASH_ENTRY_MAPPING, ModelCashEntry

__all__ = ["EMPLOYEE_SHIFT_MAPPING", "ModelEmployeeShift"]


class ModelEmployeeShift(BaseModel):
    """A work shift at a branch with the cash entries logged during it.

    Attributes:
        uuid: Shift identifier.
        created_at: Shift start.
        username: Primary user working the shift.
        branch_uuid: Branch the shift belongs to.
        cash_entries: Entries in the order the document stores them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    uuid: str = Field(default="")
    created_at: datetime = Field(default=ZERO_TIMESTAMP)
    username: str = Field(default="")
    branch_uuid: str = Field(default="")
    cash_entries: tuple[ModelCashEntry, ...] = Field(default=())


EMPLOYEE_SHIFT_MAPPING: RecordMapping[ModelEmployeeShift] = RecordMapping(
    model=ModelEmployeeShift,
    fields=(
        FieldMapping("uuid", "uuid", STRING),
        FieldMapping("created_at", "created_at", TIMESTAMP),
        FieldMapping("username", "username", STRING),
        FieldMapping("branch_uuid", "branch_uuid", STRING),
        FieldMapping(
            "cash_entries", "cash_entries", ArrayShape(RecordShape(CASH_ENTRY_MAPPING))
        ),
    ),
)
