# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Cash entry recorded against an employee shift."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from cashentries.firestore.shapes import (
    BOOLEAN,
    DOUBLE,
    STRING,
    TIMESTAMP,
    ZERO_TIMESTAMP,
    FieldMapping,
    RecordMapping,
)

__all__ = ["CASH_ENTRY_MAPPING", "ModelCashEntry"]


class ModelCashEntry(BaseModel):
    """One cash movement (expense or income) logged during a shift.

    Two entries are the same entry only if every field matches, including
    ``uuid`` and ``created_at``.

    Attributes:
        created_at: When the entry was logged.
        description: Free-text description, the source of search tokens.
        expense: True for money leaving the till.
        username: User who logged the entry.
        uuid: Entry identifier as stored by the client app.
        value: Amount.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    created_at: datetime = Field(default=ZERO_TIMESTAMP)
    description: str = Field(default="")
    expense: bool = Field(default=False)
    username: str = Field(default="")
    uuid: str = Field(default="")
    value: float = Field(default=0.0)


CASH_ENTRY_MAPPING: RecordMapping[ModelCashEntry] = RecordMapping(
    model=ModelCashEntry,
    fields=(
        FieldMapping("created_at", "created_at", TIMESTAMP),
        FieldMapping("description", "description", STRING),
        FieldMapping("expense", "expense", BOOLEAN),
        FieldMapping("username", "username", STRING),
        FieldMapping("uuid", "uuid", STRING),
        FieldMapping("value", "value", DOUBLE),
    ),
)
