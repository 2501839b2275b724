# -*- coding: utf-8 -*-
"""Domain models."""

from notice_delivery.models.lifecycle import AlertView, LifecycleState
from notice_delivery.models.notice import Notice, NoticeKind

__all__ = [
    "AlertView",
    "LifecycleState",
    "Notice",
    "NoticeKind",
]
