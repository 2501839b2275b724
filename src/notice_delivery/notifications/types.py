"""Presentation-side protocols."""

from __future__ import annotations

from typing import Protocol

from notice_delivery.models.notice import Notice


class NoticeStyler(Protocol):
    """Render a notice into text for delivery."""

    def render(self, notice: Notice) -> str:
        """Return the formatted text for the given notice."""
        ...


class NoticePresenter(Protocol):
    """Show already-formatted text immediately and synchronously."""

    def present(self, text: str) -> None:
        ...
