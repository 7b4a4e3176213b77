# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for runtime settings and log level handling."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from cashentries.enums.enum_log_level import EnumLogLevel
from cashentries.runtime.settings import CashEntriesSettings, get_settings


@pytest.mark.unit
class TestCashEntriesSettings:
    """Defaults and CASH_ENTRIES_* overrides."""

    def test_defaults(self) -> None:
        settings = CashEntriesSettings()

        assert settings.expected_content_type == "application/protobuf"
        assert settings.pending_collection == "pending_expense_entries"
        assert settings.project_id is None
        assert settings.database is None
        assert settings.log_level is EnumLogLevel.INFO

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CASH_ENTRIES_PENDING_COLLECTION", "review_queue")
        monkeypatch.setenv("CASH_ENTRIES_PROJECT_ID", "till-prod")
        monkeypatch.setenv("CASH_ENTRIES_DATABASE", "shifts")
        monkeypatch.setenv("CASH_ENTRIES_LOG_LEVEL", "DEBUG")

        settings = CashEntriesSettings()

        assert settings.pending_collection == "review_queue"
        assert settings.project_id == "till-prod"
        assert settings.database == "shifts"
        assert settings.log_level is EnumLogLevel.DEBUG

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CASH_ENTRIES_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            CashEntriesSettings()

    def test_empty_collection_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CashEntriesSettings(pending_collection="")

    def test_frozen(self) -> None:
        settings = CashEntriesSettings()

        with pytest.raises(ValidationError):
            settings.pending_collection = "other"  # type: ignore[misc]

    def test_get_settings_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("CASH_ENTRIES_PENDING_COLLECTION", "changed")

        assert get_settings() is first
        assert get_settings().pending_collection == "pending_expense_entries"


@pytest.mark.unit
class TestEnumLogLevel:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (EnumLogLevel.DEBUG, logging.DEBUG),
            (EnumLogLevel.INFO, logging.INFO),
            (EnumLogLevel.WARNING, logging.WARNING),
            (EnumLogLevel.ERROR, logging.ERROR),
            (EnumLogLevel.CRITICAL, logging.CRITICAL),
        ],
    )
    def test_to_logging_level(self, level: EnumLogLevel, expected: int) -> None:
        assert level.to_logging_level() == expected
