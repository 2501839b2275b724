"""Queue-specific exceptions."""

from __future__ import annotations

from notice_delivery.exceptions.exceptions import NoticeDeliveryError


class QueueError(NoticeDeliveryError):
    """Base exception for queue operations."""


class QueueEmpty(QueueError):
    """Raised when strictly taking an item from an empty queue (non-blocking)."""
