# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""CloudEvent entry point for Firestore shift document triggers.

Deploy with ``--entry-point detect_cash_entries_changes`` on a
``google.cloud.firestore.document.v1.written`` trigger for the shift
collection.

The Firestore store is created once per process and reused across
invocations; its client connects lazily on the first write.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import functions_framework
from cloudevents.http import CloudEvent

from cashentries.errors import CashEntriesError
from cashentries.handlers.handler_cash_entries import handle_shift_event
from cashentries.models.model_handler_result import ModelHandlerResult
from cashentries.repositories.firestore_pending_entry_store import (
    FirestorePendingEntryStore,
)
from cashentries.runtime.settings import configure_logging, get_settings

__all__ = ["detect_cash_entries_changes", "get_store"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_store() -> FirestorePendingEntryStore:
    """Return the process-wide pending entry store."""
    settings = get_settings()
    return FirestorePendingEntryStore(
        project_id=settings.project_id, database=settings.database
    )


@functions_framework.cloud_event
def detect_cash_entries_changes(cloud_event: CloudEvent) -> ModelHandlerResult:
    """Handle a Firestore document change event for an employee shift.

    Errors are logged with the event id and re-raised so the platform
    reports the invocation as failed and may redeliver it.
    """
    settings = get_settings()
    configure_logging(settings)

    event_id = cloud_event.get("id")
    try:
        result = handle_shift_event(
            cloud_event.get("datacontenttype"),
            cloud_event.data,
            get_store(),
            settings=settings,
        )
    except CashEntriesError:
        logger.exception(
            "Cash entry change handling failed. event_id=%s subject=%s",
            event_id,
            cloud_event.get("subject"),
        )
        raise

    logger.info(
        "Cash entry change handled. event_id=%s status=%s created=%d",
        event_id,
        result.status,
        len(result.document_ids),
    )
    return result
