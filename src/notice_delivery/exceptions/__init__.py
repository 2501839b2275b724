"""Exceptions subpackage."""

from notice_delivery.exceptions.exceptions import (
    ConfigurationShapeError,
    NoticeDeliveryError,
)
from notice_delivery.exceptions.queue_exceptions import (
    QueueEmpty,
    QueueError,
)

__all__ = [
    "ConfigurationShapeError",
    "NoticeDeliveryError",
    "QueueEmpty",
    "QueueError",
]
