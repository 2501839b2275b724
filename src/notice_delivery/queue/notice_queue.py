# -*- coding: utf-8 -*-
"""In-memory notice queue with a single cancellable wait handle."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Any, Callable, Optional, TypeVar

import structlog

from notice_delivery.exceptions import QueueEmpty
from notice_delivery.queue.base import INoticeQueue

T = TypeVar("T")


class NoticeQueue(INoticeQueue[T]):
    """FIFO buffer plus at most one outstanding asyncio.Future for a waiting consumer.

    The waiter is the only handoff state: None (nobody waiting) or one pending
    future. next() replaces a finished or cancelled waiter and never stacks a
    second one. Not thread-safe; all calls must come from the event loop thread.
    """

    def __init__(
        self,
        *items: T | list[T],
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the queue.

        Args:
            items: Initial items; list arguments are flattened in order.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._items: deque[T] = deque()
        for item in items:
            if isinstance(item, list):
                self._items.extend(item)
            else:
                self._items.append(item)
        self._waiter: Optional[asyncio.Future[T]] = None
        self._consumer: Optional[Callable[[T], None]] = None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def __len__(self) -> int:
        """Return the number of buffered items."""
        return len(self._items)

    def _pending_waiter(self) -> Optional[asyncio.Future[T]]:
        waiter = self._waiter
        if waiter is not None and waiter.done():
            # Resolved or cancelled from outside (e.g. the awaiting task was cancelled).
            self._waiter = None
            return None
        return waiter

    def has_waiter(self) -> bool:
        """Return True if a consumer is currently waiting on next()."""
        return self._pending_waiter() is not None

    def accept(self, item: T) -> None:
        """Hand item to the waiting consumer, or the push consumer, or buffer it."""
        waiter = self._pending_waiter()
        if waiter is not None:
            self._waiter = None
            waiter.set_result(item)
            self._logger.debug("notice_queue_handoff", buffered=len(self._items))
            return
        if self._consumer is not None:
            self._consumer(item)
            return
        self._items.append(item)
        self._logger.debug("notice_queue_buffered", buffered=len(self._items))

    def next(self) -> asyncio.Future[T]:
        """Return a handle resolving to the next item.

        Must be called with a running event loop.
        """
        waiter = self._pending_waiter()
        if waiter is not None:
            return waiter
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        if self._items:
            future.set_result(self._items.popleft())
            return future
        self._waiter = future
        return future

    def size(self) -> int:
        return len(self._items)

    def queued(self) -> bool:
        return len(self._items) > 0

    def shift(self) -> Optional[T]:
        if self._items:
            return self._items.popleft()
        return None

    def shift_nowait(self) -> T:
        """Remove and return the head item.

        Raises:
            QueueEmpty: If the buffer is empty.
        """
        if not self._items:
            raise QueueEmpty("notice queue is empty")
        return self._items.popleft()

    def flush(self) -> list[T]:
        items = list(self._items)
        self._items.clear()
        return items

    def clear_promise(self) -> None:
        waiter = self._waiter
        self._waiter = None
        if waiter is not None and not waiter.done():
            waiter.cancel()
            self._logger.debug("notice_queue_wait_cancelled")

    def attach_consumer(self, consumer: Callable[[T], None]) -> None:
        self._consumer = consumer

    def detach_consumer(self) -> None:
        self._consumer = None
