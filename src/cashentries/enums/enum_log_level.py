# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Log level setting for the function runtime."""

import logging
from enum import StrEnum


class EnumLogLevel(StrEnum):
    """Log levels accepted in ``CASH_ENTRIES_LOG_LEVEL``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Numeric level for ``logging``."""
        return logging.getLevelNamesMapping()[self.value]


__all__ = ["EnumLogLevel"]
