"""Custom exceptions for the kvstore package."""

from __future__ import annotations

from typing import Any

DEFAULT_FAILURE_MESSAGE = "Request failed"


class KVStoreError(Exception):
    """Base exception for all kvstore errors."""


class RequestFailedError(KVStoreError):
    """Raised when the service answers with a non-success status.

    The message is the service's ``error`` string when it sent one,
    otherwise ``"Request failed"``.
    """

    def __init__(
        self,
        message: str = DEFAULT_FAILURE_MESSAGE,
        *,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class MalformedResponseError(KVStoreError):
    """Raised when a successful response lacks the field an operation returns."""

    def __init__(self, action: str, field: str) -> None:
        self.action = action
        self.field = field
        super().__init__(f"Response to '{action}' is missing field '{field}'")
