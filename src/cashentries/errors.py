# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Error types for cash entry change detection.

Every error aborts the invocation that raised it. Nothing here is retried
locally; redelivery of the triggering event is left to the event platform.

Error kinds:
    ContentTypeError: The event envelope is not the expected encoding.
    DecodeError: A document value does not fit its declared shape, an
        identifier failed to parse, or the event payload is not valid
        protobuf.
    StoreConnectionError: The document store client could not be created.
    WriteError: Persisting a pending entry failed. Entries written earlier
        in the same invocation are not rolled back.
    InvocationCancelledError: The caller cancelled the invocation.
"""

from __future__ import annotations

__all__ = [
    "CashEntriesError",
    "ContentTypeError",
    "DecodeError",
    "InvocationCancelledError",
    "StoreConnectionError",
    "WriteError",
]


class CashEntriesError(Exception):
    """Base class for all errors raised by this package."""


class ContentTypeError(CashEntriesError):
    """Raised when the event declares an unexpected content type.

    Example:
        >>> raise ContentTypeError(received="application/json",
        ...                        expected="application/protobuf")
    """

    def __init__(self, *, received: str | None, expected: str) -> None:
        self.received = received
        self.expected = expected
        super().__init__(
            f"unexpected content type: {received!r} (expected {expected!r})"
        )


class DecodeError(CashEntriesError):
    """Raised when a tagged-value document cannot be decoded.

    Attributes:
        path: Dotted path of the failing field (``cash_entries[1].value``),
            or an empty string when the failure is not tied to a field.
        reason: Human-readable description of the failure.
    """

    def __init__(self, reason: str, *, path: str = "") -> None:
        self.path = path
        self.reason = reason
        if path:
            super().__init__(f"failed to decode field {path!r}: {reason}")
        else:
            super().__init__(f"failed to decode document: {reason}")


class StoreConnectionError(CashEntriesError):
    """Raised when the document store cannot be reached."""


class WriteError(CashEntriesError):
    """Raised when a pending entry could not be written.

    Attributes:
        collection: Destination collection of the failed write.
        written_before_failure: Number of documents already created in this
            invocation. These are kept.
    """

    def __init__(
        self, message: str, *, collection: str, written_before_failure: int = 0
    ) -> None:
        self.collection = collection
        self.written_before_failure = written_before_failure
        super().__init__(message)


class InvocationCancelledError(CashEntriesError):
    """Raised when the calling context cancels the invocation mid-flight."""
