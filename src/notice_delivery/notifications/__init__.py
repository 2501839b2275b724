"""Presentation-side collaborators: renderers, stylers and the detached producer."""

from notice_delivery.notifications.detached import DetachedNotices
from notice_delivery.notifications.strategies import (
    BaseAlertRenderer,
    ConsoleAlertRenderer,
    ConsolePresenter,
)
from notice_delivery.notifications.stylers import PlainNoticeStyler
from notice_delivery.notifications.types import NoticePresenter, NoticeStyler

__all__ = [
    "BaseAlertRenderer",
    "ConsoleAlertRenderer",
    "ConsolePresenter",
    "DetachedNotices",
    "NoticePresenter",
    "NoticeStyler",
    "PlainNoticeStyler",
]
