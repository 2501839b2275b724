# -*- coding: utf-8 -*-
"""Console alert renderer and presenter (print-based)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from notice_delivery.models.lifecycle import AlertView
from notice_delivery.notifications.strategies.base import BaseAlertRenderer

if TYPE_CHECKING:  # pragma: no cover
    from notice_delivery.config.config import Settings
    from notice_delivery.notifications.types import NoticeStyler


class ConsoleAlertRenderer(BaseAlertRenderer):
    """Print each displayed notice, with the number still queued behind it."""

    def __init__(
        self,
        settings: "Settings",
        styler: "NoticeStyler",
        *,
        write: Callable[[str], None] = print,
    ) -> None:
        super().__init__(settings)
        self._styler = styler
        self._write = write

    def render(self, view: AlertView) -> None:
        if not self.settings.console.enabled:
            return
        body = self._styler.render(view.notice)
        timeout = f"{view.timeout_ms} ms" if view.timeout_ms > 0 else "until closed"
        self._write(f"{body}\n[{view.queued()} queued, {timeout}]")


class ConsolePresenter:
    """Print already-formatted text (fallback for detached producers).

    When console output is disabled the text goes to the log instead, so a
    presented notice is never silently lost.
    """

    def __init__(
        self,
        settings: "Settings",
        *,
        write: Callable[[str], None] = print,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self.settings = settings
        self._write = write
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def present(self, text: str) -> None:
        if not self.settings.console.enabled:
            self._logger.info("notice_presented", text=text)
            return
        self._write(text)
