# -*- coding: utf-8 -*-
"""Display slot lifecycle."""

from notice_delivery.lifecycle.controller import Listener, NoticeLifecycle

__all__ = ["Listener", "NoticeLifecycle"]
