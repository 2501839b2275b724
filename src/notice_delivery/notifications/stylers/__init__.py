"""Notice stylers."""

from notice_delivery.notifications.stylers.notice_styler import PlainNoticeStyler

__all__ = ["PlainNoticeStyler"]
