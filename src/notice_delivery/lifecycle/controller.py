# -*- coding: utf-8 -*-
"""Lifecycle controller: owns the single display slot of a scope.

Loop: IDLE -> AWAITING (queue.next()) -> DISPLAYING (digest, arm timer,
publish view) -> IDLE on timer expiry or close() -> AWAITING again.

Each displayed notice gets its own dismissal future. Timer and close() both
go through _dismiss() with that future as token, so the DISPLAYING -> IDLE
transition happens once per notice no matter how many triggers arrive, and a
stale close() from an earlier view never dismisses a later notice.
"""

from __future__ import annotations

import asyncio
from functools import partial
from types import TracebackType
from typing import Any, Callable, Optional, Type

import structlog

from notice_delivery.digest import DigestPipeline
from notice_delivery.models.lifecycle import AlertView, LifecycleState
from notice_delivery.models.notice import Notice
from notice_delivery.queue import INoticeQueue

Listener = Callable[[Optional[AlertView]], None]


class NoticeLifecycle:
    """Pull notices from the queue one at a time and manage their display.

    Run via start()/stop() or ``async with``. Nothing here raises to callers:
    renderer and listener failures are logged and the loop carries on.
    """

    def __init__(
        self,
        queue: Optional[INoticeQueue[Notice]],
        pipeline: DigestPipeline,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the controller.

        Args:
            queue: The scope's notice queue. None means detached usage: the
                controller logs a diagnostic on start and stays idle.
            pipeline: Digest pipeline for the scope.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._queue = queue
        self._pipeline = pipeline
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._state = LifecycleState.IDLE
        self._current: Optional[Notice] = None
        self._dismissed: Optional[asyncio.Future[str]] = None
        self._timer: Optional[asyncio.TimerHandle] = None
        self._deadline: Optional[float] = None
        self._listeners: list[Listener] = []
        self._running = False
        self._lock = asyncio.Lock()
        self._worker_task: Optional[asyncio.Task[None]] = None
        self.dismissed_count = 0

    async def __aenter__(self) -> NoticeLifecycle:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> bool:
        await self.stop()
        return False

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def current(self) -> Optional[Notice]:
        """The digested notice on display, or None."""
        return self._current

    @property
    def is_running(self) -> bool:
        return self._running

    def queued_count(self) -> int:
        return self._queue.size() if self._queue is not None else 0

    def remaining_ms(self) -> Optional[int]:
        """Milliseconds until auto-dismissal, or None when no timer is armed."""
        if self._deadline is None:
            return None
        remaining = self._deadline - asyncio.get_running_loop().time()
        return max(0, round(remaining * 1000))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with each new AlertView, and with None when the slot empties.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Dismiss the notice on display. No-op when nothing is displayed."""
        token = self._dismissed
        if token is not None:
            self._dismiss(token, "closed")

    async def start(self) -> None:
        """Start the display loop in a background task. Idempotent."""
        async with self._lock:
            if self._running:
                return
            if self._queue is None:
                self._logger.warning(
                    "lifecycle_detached_no_queue",
                    hint="mount the display inside a NotificationScope to receive notices",
                )
                return
            self._running = True
            self._state = LifecycleState.IDLE
            self._worker_task = asyncio.create_task(self._run_loop(self._queue))

    async def stop(self) -> None:
        """Cancel the loop, release the queue wait and clear the slot. Idempotent."""
        async with self._lock:
            if not self._running:
                return
            self._running = False
            task = self._worker_task
            self._worker_task = None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._cancel_timer()
        if self._queue is not None:
            self._queue.clear_promise()
        was_displaying = self._current is not None
        self._current = None
        self._dismissed = None
        self._state = LifecycleState.STOPPED
        if was_displaying:
            self._publish(None)
        self._logger.debug("lifecycle_stopped", dismissed_count=self.dismissed_count)

    async def _run_loop(self, queue: INoticeQueue[Notice]) -> None:
        self._logger.debug("lifecycle_started")
        try:
            while True:
                self._state = LifecycleState.AWAITING
                handle = queue.next()
                try:
                    notice = await handle
                except asyncio.CancelledError:
                    task = asyncio.current_task()
                    if task is not None and task.cancelling():
                        raise
                    # The wait was released via clear_promise(); ask again.
                    self._logger.debug("lifecycle_wait_released")
                    continue
                await self._display(notice)
        except asyncio.CancelledError:
            self._logger.debug("lifecycle_cancelled")
            raise

    async def _display(self, notice: Notice) -> None:
        try:
            digested = self._pipeline.digest(notice)
        except Exception:
            self._logger.exception("lifecycle_digest_failed", notice_id=str(notice.id))
            self._state = LifecycleState.IDLE
            return

        loop = asyncio.get_running_loop()
        dismissed: asyncio.Future[str] = loop.create_future()
        self._dismissed = dismissed
        self._current = digested
        self._state = LifecycleState.DISPLAYING

        timeout_ms = digested.timeout_ms or 0
        if timeout_ms > 0:
            delay = timeout_ms / 1000
            self._deadline = loop.time() + delay
            self._timer = loop.call_later(delay, self._dismiss, dismissed, "timeout")

        self._logger.debug(
            "lifecycle_displaying",
            notice_id=str(digested.id),
            notice_kind=digested.kind,
            timeout_ms=timeout_ms,
            queued=self.queued_count(),
        )
        view = AlertView(
            notice=digested,
            close=partial(self._dismiss, dismissed, "closed"),
            timeout_ms=timeout_ms,
            queued=self.queued_count,
        )
        self._render(view)
        if not dismissed.done():
            # The renderer may already have closed it.
            self._publish(view)

        reason = await dismissed
        self._logger.debug("lifecycle_dismissed", notice_id=str(digested.id), reason=reason)

    def _dismiss(self, token: asyncio.Future[str], reason: str) -> None:
        if token is not self._dismissed or token.done():
            return
        self._cancel_timer()
        if self._queue is not None:
            self._queue.clear_promise()
        self._current = None
        self._dismissed = None
        self._state = LifecycleState.IDLE
        self.dismissed_count += 1
        token.set_result(reason)
        self._publish(None)

    def _cancel_timer(self) -> None:
        timer = self._timer
        self._timer = None
        self._deadline = None
        if timer is not None:
            timer.cancel()

    def _render(self, view: AlertView) -> None:
        renderer = self._pipeline.alert_renderer
        try:
            renderer(view)
        except Exception:
            self._logger.exception("lifecycle_renderer_failed", notice_id=str(view.notice.id))

    def _publish(self, view: Optional[AlertView]) -> None:
        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception:
                self._logger.exception("lifecycle_listener_failed")
