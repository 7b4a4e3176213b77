# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Record models and their Firestore field mappings."""

from cashentries.models.model_cash_entry import CASH_ENTRY_MAPPING, ModelCashEntry
from cashentries.models.model_employee_shift import (
    EMPLOYEE_SHIFT_MAPPING,
    ModelEmployeeShift,
)
from cashentries.models.model_handler_result import ModelHandlerResult
from cashentries.models.model_pending_entry import (
    PENDING_ENTRY_MAPPING,
    SHIFT_DATA_MAPPING,
    ModelPendingEntry,
    ModelShiftData,
)

__all__ = [
    "CASH_ENTRY_MAPPING",
    "EMPLOYEE_SHIFT_MAPPING",
    "PENDING_ENTRY_MAPPING",
    "SHIFT_DATA_MAPPING",
    "ModelCashEntry",
    "ModelEmployeeShift",
    "ModelHandlerResult",
    "ModelPendingEntry",
    "ModelShiftData",
]
