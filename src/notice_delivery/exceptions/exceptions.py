"""Custom exceptions for notice delivery."""

from __future__ import annotations

from typing import Any


class NoticeDeliveryError(Exception):
    """Base exception for notice delivery errors."""

    pass


class ConfigurationShapeError(NoticeDeliveryError):
    """Raised when a configuration value lacks the expected capability.

    Registry setters catch this and turn it into a no-op plus a diagnostic;
    it never reaches callers of the public setters.
    """

    def __init__(
        self,
        message: str,
        *,
        slot: str,
        expected: str,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.slot = slot
        self.expected = expected
        self.value_type = type(value).__name__
