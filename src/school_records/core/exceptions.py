from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record does not exist in the store."""


class StoreError(Exception):
    """Base exception for failures talking to the remote record store."""


class TransportError(StoreError):
    """Connectivity failure, timeout, or a 5xx that survived all retries."""



class RecordWriteError(StoreError):
    """A create/update produced no record.

    Carries the notifications collected while processing the batch so the
    caller can surface every field-level error.
    """

    def __init__(self, message: str, notifications=()):
        super().__init__(message)
        self.notifications = tuple(notifications)
