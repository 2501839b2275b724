# -*- coding: utf-8 -*-
"""Producer used when no notification scope is mounted.

There is no queue and no display slot behind it, so every accepted notice is
formatted and shown at once through a synchronous presenter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional

import structlog

from notice_delivery.config import Settings, get_settings
from notice_delivery.models.notice import Notice
from notice_delivery.notifications.strategies.console import ConsolePresenter
from notice_delivery.notifications.stylers.notice_styler import PlainNoticeStyler
from notice_delivery.notifications.types import NoticePresenter, NoticeStyler
from notice_delivery.registry import NoticeRegistry, get_registry


class DetachedNotices:
    """Fallback producer: present each notice immediately instead of queueing it."""

    def __init__(
        self,
        registry: Optional[NoticeRegistry] = None,
        presenter: Optional[NoticePresenter] = None,
        styler: Optional[NoticeStyler] = None,
        settings: Optional[Settings] = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._registry = registry
        resolved_settings = settings if settings is not None else get_settings()
        self._presenter = presenter if presenter is not None else ConsolePresenter(resolved_settings)
        self._styler = styler if styler is not None else PlainNoticeStyler(
            format_title=lambda: self.registry.title_case,
            default_message=lambda: self.registry.default_message,
        )
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def registry(self) -> NoticeRegistry:
        # Resolved per call so set_registry() is honoured by the shared default instance.
        return self._registry if self._registry is not None else get_registry()

    def accept(self, notice: Notice | Mapping[str, Any]) -> None:
        """Present notice now. Never drops it."""
        if not isinstance(notice, Notice):
            notice = Notice.from_mapping(notice)
        self._logger.warning(
            "notices_detached_accept",
            notice_id=str(notice.id),
            hint="accept() was called outside a mounted NotificationScope",
        )
        self._presenter.present(self._styler.render(notice))
