# -*- coding: utf-8 -*-
"""Built-in defaults for the registry slots."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from notice_delivery.models.notice import Notice
from notice_delivery.utils.strings import title_case

if TYPE_CHECKING:  # pragma: no cover
    from notice_delivery.models.lifecycle import AlertView

DEFAULT_KIND = "primary"
DEFAULT_MESSAGE = "No message!"


def default_digest(
    notice: Notice,
    format_title: Optional[Callable[[str], str]] = None,
    default_message: Optional[str] = None,
) -> Notice:
    """Fill in kind and message and format the title.

    Args:
        notice: The raw notice.
        format_title: Title formatter; defaults to title_case.
        default_message: Message used when the notice has none.

    Returns:
        A new notice; the input is not modified.
    """
    formatter = format_title or title_case
    changes: dict[str, Any] = {}
    if not notice.kind:
        changes["kind"] = DEFAULT_KIND
    if notice.title:
        changes["title"] = formatter(notice.title)
    if notice.message is None:
        changes["message"] = default_message if default_message is not None else DEFAULT_MESSAGE
    return notice.with_fields(**changes) if changes else notice


def noop_renderer(view: "AlertView") -> None:
    """Placeholder alert renderer: the display layer subscribes to the scope instead."""
    return None
