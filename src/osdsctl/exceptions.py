"""Custom exception hierarchy for the OpenSDS client."""
from __future__ import annotations

from typing import Any


class OpenSDSError(RuntimeError):
    """Base error for OpenSDS failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class RequestError(OpenSDSError):
    """Raised when an HTTP request cannot be fulfilled."""


class UnexpectedResponseError(OpenSDSError):
    """Raised when the API returns an unexpected payload structure."""


class ArgumentCountError(OpenSDSError):
    """Raised when a command receives the wrong number of positional arguments."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(
            "The number of args is not correct!",
            details={"expected": expected, "received": received},
        )
        self.expected = expected
        self.received = received


class SizeParseError(OpenSDSError):
    """Raised when a volume size argument is not a non-negative integer."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"error parsing size {raw}: {reason}", details=raw)
        self.raw = raw
