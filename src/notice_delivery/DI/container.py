# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from notice_delivery.config import get_settings
from notice_delivery.notifications.detached import DetachedNotices
from notice_delivery.notifications.strategies.console import ConsolePresenter
from notice_delivery.notifications.stylers.notice_styler import PlainNoticeStyler
from notice_delivery.registry import NoticeRegistry, get_registry
from notice_delivery.scope import NotificationScope


def _build_styler(registry: NoticeRegistry) -> PlainNoticeStyler:
    """Styler that reads the registry's formatter and default message at render time."""
    return PlainNoticeStyler(
        format_title=lambda: registry.title_case,
        default_message=lambda: registry.default_message,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, registry, presenters and scope factory."""

    config = providers.Callable(get_settings)

    registry = providers.Callable(get_registry)

    notice_styler = providers.Singleton(_build_styler, registry)

    presenter = providers.Singleton(
        ConsolePresenter,
        settings=config,
    )

    detached_notices = providers.Singleton(
        DetachedNotices,
        registry=registry,
        presenter=presenter,
        styler=notice_styler,
        settings=config,
    )

    # A new scope (and therefore a new queue) on every call.
    notification_scope = providers.Factory(
        NotificationScope,
        registry=registry,
        settings=config,
    )
