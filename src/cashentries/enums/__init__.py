# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Enumerations shared across the package."""

from cashentries.enums.enum_handler_status import EnumHandlerStatus
from cashentries.enums.enum_log_level import EnumLogLevel

__all__ = ["EnumHandlerStatus", "EnumLogLevel"]
