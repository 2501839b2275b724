# -*- coding: utf-8 -*-
"""Notification scope: one mounted display context.

A scope owns one queue, one digest pipeline and one lifecycle controller.
While mounted (``async with scope``) it is the producer returned by
get_notices(); outside any scope get_notices() returns the shared
DetachedNotices, which presents notices immediately.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextvars import ContextVar, Token
from types import TracebackType
from typing import Any, Callable, Optional, Protocol, Type

import structlog

from notice_delivery.config import ScopeConfig, Settings, get_settings
from notice_delivery.digest import DigestPipeline
from notice_delivery.lifecycle import Listener, NoticeLifecycle
from notice_delivery.models.lifecycle import LifecycleState
from notice_delivery.models.notice import Notice
from notice_delivery.notifications.detached import DetachedNotices
from notice_delivery.queue import NoticeQueue
from notice_delivery.registry import NoticeRegistry, get_registry


class NoticeProducer(Protocol):
    """Anything notices can be sent to."""

    def accept(self, notice: Notice | Mapping[str, Any]) -> None:
        ...


class NotificationScope:
    """Producer handle plus single-slot consumer surface for one display context."""

    def __init__(
        self,
        config: ScopeConfig | Mapping[str, Any] | None = None,
        registry: Optional[NoticeRegistry] = None,
        settings: Optional[Settings] = None,
        queue: Optional[NoticeQueue[Notice]] = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the scope.

        Args:
            config: Scope overrides; a mapping is validated into a ScopeConfig
                (malformed or unknown fields are dropped).
            registry: Shared defaults; the process-wide registry if omitted.
            settings: Settings; get_settings() if omitted.
            queue: Queue to own; a fresh one if omitted. Never share it.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        if config is None:
            config = ScopeConfig()
        elif not isinstance(config, ScopeConfig):
            config = ScopeConfig.model_validate(dict(config))
        self.config = config
        self.registry = registry if registry is not None else get_registry()
        self.settings = settings if settings is not None else get_settings()
        self.queue: NoticeQueue[Notice] = queue if queue is not None else NoticeQueue[Notice]()
        self.pipeline = DigestPipeline(
            registry=self.registry,
            scope_config=self.config,
            settings=self.settings,
            get_logger=get_logger,
        )
        self.lifecycle = NoticeLifecycle(self.queue, self.pipeline, get_logger=get_logger)
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._token: Optional[Token[NoticeProducer]] = None
        self._previous: Optional[NoticeProducer] = None

    async def __aenter__(self) -> NotificationScope:
        await self.mount()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> bool:
        await self.unmount()
        return False

    async def mount(self) -> None:
        """Start the display loop and make this scope the current producer."""
        if self._token is None:
            self._previous = current_notices.get(None)
            self._token = current_notices.set(self)
        await self.lifecycle.start()
        self._logger.debug("scope_mounted", queued=self.queue.size())

    async def unmount(self) -> None:
        """Stop the display loop and restore the previous current producer."""
        await self.lifecycle.stop()
        if self._token is not None:
            try:
                current_notices.reset(self._token)
            except ValueError:
                # Token created in another context (e.g. mounted from a different task).
                previous = self._previous
                current_notices.set(previous if previous is not None else _detached_default())
            self._token = None
            self._previous = None
        self._logger.debug("scope_unmounted", queued=self.queue.size())

    def accept(self, notice: Notice | Mapping[str, Any]) -> None:
        """Queue notice for display in this scope."""
        if not isinstance(notice, Notice):
            notice = Notice.from_mapping(notice)
        self.queue.accept(notice)

    @property
    def current(self) -> Optional[Notice]:
        """The digested notice on display, or None."""
        return self.lifecycle.current

    @property
    def state(self) -> LifecycleState:
        return self.lifecycle.state

    def close(self) -> None:
        """Dismiss the notice on display."""
        self.lifecycle.close()

    def queued_count(self) -> int:
        """Number of notices waiting behind the one on display."""
        return self.queue.size()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.lifecycle.subscribe(listener)


_detached: Optional[DetachedNotices] = None


def _detached_default() -> DetachedNotices:
    global _detached
    if _detached is None:
        _detached = DetachedNotices()
    return _detached


current_notices: ContextVar[NoticeProducer] = ContextVar("current_notices")


def get_notices() -> NoticeProducer:
    """Return the innermost mounted scope, or the detached fallback producer."""
    producer = current_notices.get(None)
    if producer is None:
        return _detached_default()
    return producer
