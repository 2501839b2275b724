# -*- coding: utf-8 -*-
"""Plain-text notice styler: one line each for kind, title and message."""

from __future__ import annotations

from typing import Callable, Optional

from notice_delivery.models.notice import Notice
from notice_delivery.notifications.types import NoticeStyler
from notice_delivery.registry.defaults import DEFAULT_MESSAGE
from notice_delivery.utils.strings import title_case


class PlainNoticeStyler(NoticeStyler):
    """Render ``Kind\\nTitle\\nMessage``, skipping the kind and title lines when absent.

    Formatter and default message may be given as callables so that they are
    read at render time (e.g. from a registry that can change).
    """

    def __init__(
        self,
        format_title: Optional[Callable[[], Callable[[str], str]]] = None,
        default_message: Optional[Callable[[], str]] = None,
    ) -> None:
        self._format_title = format_title or (lambda: title_case)
        self._default_message = default_message or (lambda: DEFAULT_MESSAGE)

    def render(self, notice: Notice) -> str:
        formatter = self._format_title()
        lines: list[str] = []
        if notice.kind:
            lines.append(formatter(notice.kind))
        if notice.title:
            lines.append(formatter(notice.title))
        lines.append(notice.message if notice.message else self._default_message())
        return "\n".join(lines)
