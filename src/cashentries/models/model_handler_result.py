# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Result of handling one shift document change."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cashentries.enums.enum_handler_status import EnumHandlerStatus

__all__ = ["ModelHandlerResult"]


class ModelHandlerResult(BaseModel):
    """Summary of one invocation.

    Attributes:
        status: What the invocation did.
        shift_uuid: Shift the change belonged to (empty for deletes).
        new_entry_count: Cash entries detected as new.
        document_ids: Ids of the pending entry documents created, in the
            order the entries appear in the shift.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: EnumHandlerStatus
    shift_uuid: str = Field(default="")
    new_entry_count: int = Field(default=0, ge=0)
    document_ids: tuple[str, ...] = Field(default=())
