"""Alert renderer strategies."""

from notice_delivery.notifications.strategies.base import BaseAlertRenderer
from notice_delivery.notifications.strategies.console import (
    ConsoleAlertRenderer,
    ConsolePresenter,
)

__all__ = [
    "BaseAlertRenderer",
    "ConsoleAlertRenderer",
    "ConsolePresenter",
]
