# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Runtime settings loaded from ``CASH_ENTRIES_*`` environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cashentries.constants import PENDING_ENTRIES_COLLECTION, PROTOBUF_CONTENT_TYPE
from cashentries.enums.enum_log_level import EnumLogLevel

__all__ = ["CashEntriesSettings", "configure_logging", "get_settings"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class CashEntriesSettings(BaseSettings):
    """Settings for the cash entry trigger.

    Environment variables:
        CASH_ENTRIES_EXPECTED_CONTENT_TYPE: str (default application/protobuf)
        CASH_ENTRIES_PENDING_COLLECTION: str (default pending_expense_entries)
        CASH_ENTRIES_PROJECT_ID: str (default: client library default)
        CASH_ENTRIES_DATABASE: str (default: client library default)
        CASH_ENTRIES_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default INFO)
    """

    model_config = SettingsConfigDict(
        env_prefix="CASH_ENTRIES_",
        extra="ignore",
        frozen=True,
    )

    expected_content_type: str = Field(
        default=PROTOBUF_CONTENT_TYPE,
        min_length=1,
        description="Content type required on incoming events",
    )
    pending_collection: str = Field(
        default=PENDING_ENTRIES_COLLECTION,
        min_length=1,
        description="Collection receiving pending entry documents",
    )
    project_id: str | None = Field(
        default=None,
        description="Google Cloud project of the Firestore database",
    )
    database: str | None = Field(
        default=None,
        description="Firestore database id",
    )
    log_level: EnumLogLevel = Field(
        default=EnumLogLevel.INFO,
        description="Root log level for the function process",
    )


@lru_cache(maxsize=1)
def get_settings() -> CashEntriesSettings:
    """Return the process-wide settings, read from the environment once."""
    return CashEntriesSettings()


def configure_logging(settings: CashEntriesSettings) -> None:
    """Configure root logging for the function process."""
    logging.basicConfig(
        level=settings.log_level.to_logging_level(),
        format=LOG_FORMAT,
    )
