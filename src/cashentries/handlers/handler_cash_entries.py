# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Cash entry change handler.

Reacts to a change of an employee shift document and files every newly
added cash entry as a pending expense entry.

Flow:
    1. Reject events whose content type is not the expected encoding.
    2. Parse the protobuf payload into before/after tagged-value maps.
    3. Deleted document (no after snapshot): stop, report success.
    4. Decode both snapshots. A missing before snapshot means the document
       was just created and every entry in it is new.
    5. Detect new entries and write one pending entry per new entry, in
       the order they appear in the shift.

Every failure aborts the invocation. Writes are independent document
creations: entries written before a failure stay written, and nothing is
retried here. Redelivery is up to the event platform.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from cashentries.change_detector.detector import detect_new_entries
from cashentries.constants import PENDING_ENTRIES_COLLECTION
from cashentries.enums.enum_handler_status import EnumHandlerStatus
from cashentries.errors import ContentTypeError, InvocationCancelledError, WriteError
from cashentries.firestore.decoder import decode_document
from cashentries.firestore.encoder import encode_record
from cashentries.firestore.event_data import DocumentChange, parse_document_event
from cashentries.models.model_cash_entry import ModelCashEntry
from cashentries.models.model_employee_shift import (
    EMPLOYEE_SHIFT_MAPPING,
    ModelEmployeeShift,
)
from cashentries.models.model_handler_result import ModelHandlerResult
from cashentries.models.model_pending_entry import (
    PENDING_ENTRY_MAPPING,
    ModelPendingEntry,
    ModelShiftData,
)
from cashentries.protocols import ProtocolPendingEntryStore
from cashentries.runtime.settings import CashEntriesSettings, get_settings
from cashentries.search_index.builder import build_search_index

__all__ = [
    "build_pending_entry",
    "handle_document_change",
    "handle_shift_event",
    "validate_content_type",
]

logger = logging.getLogger(__name__)

CancellationCheck = Callable[[], bool]


def handle_shift_event(
    content_type: str | None,
    payload: bytes,
    store: ProtocolPendingEntryStore,
    *,
    settings: CashEntriesSettings | None = None,
    is_cancelled: CancellationCheck | None = None,
) -> ModelHandlerResult:
    """Handle one raw shift document change event.

    Args:
        content_type: Content type declared by the event envelope.
        payload: Serialized ``DocumentEventData``.
        store: Destination for pending entry documents.
        settings: Runtime settings. Defaults to ``get_settings()``.
        is_cancelled: Optional check polled before each write.

    Returns:
        Summary of what the invocation did.

    Raises:
        ContentTypeError: If ``content_type`` is not the expected one.
        DecodeError: If the payload or a snapshot cannot be decoded.
        StoreConnectionError: If the store cannot be reached.
        WriteError: If a pending entry could not be written.
        InvocationCancelledError: If ``is_cancelled`` reports cancellation.
    """
    settings = settings or get_settings()
    validate_content_type(content_type, settings.expected_content_type)
    change = parse_document_event(payload)
    return handle_document_change(
        change,
        store,
        collection=settings.pending_collection,
        is_cancelled=is_cancelled,
    )


def validate_content_type(content_type: str | None, expected: str) -> None:
    """Raise ``ContentTypeError`` unless ``content_type`` equals ``expected``."""
    if content_type != expected:
        raise ContentTypeError(received=content_type, expected=expected)


def handle_document_change(
    change: DocumentChange,
    store: ProtocolPendingEntryStore,
    *,
    collection: str = PENDING_ENTRIES_COLLECTION,
    is_cancelled: CancellationCheck | None = None,
) -> ModelHandlerResult:
    """Detect new cash entries in a parsed change and persist them.

    Both snapshots are decoded before anything is written, so a malformed
    document never results in a partial set of writes.
    """
    if change.new_fields is None:
        logger.info(
            "Document deleted, no new document data available. document=%s",
            change.document_name or "<unknown>",
        )
        return ModelHandlerResult(status=EnumHandlerStatus.SKIPPED_DELETED)

    after = decode_document(change.new_fields, EMPLOYEE_SHIFT_MAPPING)
    before_entries: tuple[ModelCashEntry, ...] = ()
    if change.old_fields is not None:
        before_entries = decode_document(
            change.old_fields, EMPLOYEE_SHIFT_MAPPING
        ).cash_entries

    new_entries = detect_new_entries(before_entries, after.cash_entries)
    if not new_entries:
        logger.debug("No new cash entries. shift_uuid=%s", after.uuid)
        return ModelHandlerResult(
            status=EnumHandlerStatus.NO_CHANGES, shift_uuid=after.uuid
        )

    logger.info(
        "Detected %d new cash entr%s. shift_uuid=%s branch_uuid=%s",
        len(new_entries),
        "y" if len(new_entries) == 1 else "ies",
        after.uuid,
        after.branch_uuid,
    )

    document_ids: list[str] = []
    for entry in new_entries:
        if is_cancelled is not None and is_cancelled():
            raise InvocationCancelledError(
                f"cancelled after {len(document_ids)} of {len(new_entries)} "
                f"pending entries were written"
            )
        pending = build_pending_entry(after, entry)
        document = encode_record(pending, PENDING_ENTRY_MAPPING)
        try:
            document_id = store.create(collection, document)
        except WriteError as exc:
            raise WriteError(
                f"failed to create pending expense entry for cash entry "
                f"{entry.uuid!r}: {exc}",
                collection=collection,
                written_before_failure=len(document_ids),
            ) from exc
        logger.info(
            "Created pending expense entry. document_id=%s entry_uuid=%s",
            document_id,
            entry.uuid,
        )
        document_ids.append(document_id)

    return ModelHandlerResult(
        status=EnumHandlerStatus.ENTRIES_CREATED,
        shift_uuid=after.uuid,
        new_entry_count=len(new_entries),
        document_ids=tuple(document_ids),
    )


def build_pending_entry(
    shift: ModelEmployeeShift, entry: ModelCashEntry
) -> ModelPendingEntry:
    """Build the unresolved pending entry for a newly detected cash entry."""
    return ModelPendingEntry(
        cash_entry=entry,
        branch_uuid=shift.branch_uuid,
        resolved=False,
        resolved_by=None,
        resolved_at=None,
        notes=None,
        shift_data=ModelShiftData(
            uuid=shift.uuid,
            start_time=shift.created_at,
            main_shift_user=shift.username,
        ),
        indexes=tuple(build_search_index(entry.description)),
    )
