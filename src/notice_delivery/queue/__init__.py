# -*- coding: utf-8 -*-
"""Notice queue abstraction and implementation."""

from notice_delivery.queue.base import INoticeQueue
from notice_delivery.queue.notice_queue import NoticeQueue

__all__ = [
    "INoticeQueue",
    "NoticeQueue",
]
