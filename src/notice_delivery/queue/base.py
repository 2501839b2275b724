# -*- coding: utf-8 -*-
"""Notice queue interface."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class INoticeQueue(ABC, Generic[T]):
    """Abstract single-consumer mailbox: ordered buffer plus a one-slot async handoff.

    At most one wait handle is outstanding at a time. accept() resolves that
    handle when present, and only buffers the item otherwise.
    """

    @abstractmethod
    def accept(self, item: T) -> None:
        """Hand item to the waiting consumer, or append it to the buffer.

        Args:
            item: The item to deliver.
        """
        ...

    @abstractmethod
    def next(self) -> asyncio.Future[T]:
        """Return a handle that resolves to the next item.

        Repeated calls while a wait is outstanding return the same handle.

        Returns:
            A future; already resolved when the buffer was non-empty.
        """
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of buffered (not yet delivered) items."""
        ...

    @abstractmethod
    def queued(self) -> bool:
        """Return True if at least one item is buffered."""
        ...

    @abstractmethod
    def shift(self) -> Optional[T]:
        """Remove and return the head item without blocking, or None if empty."""
        ...

    @abstractmethod
    def flush(self) -> list[T]:
        """Empty the buffer and return everything that was in it, in order."""
        ...

    @abstractmethod
    def clear_promise(self) -> None:
        """Cancel the outstanding wait (if any) without resolving it."""
        ...

    @abstractmethod
    def attach_consumer(self, consumer: Callable[[T], None]) -> None:
        """Deliver items synchronously to consumer when nobody is waiting."""
        ...

    @abstractmethod
    def detach_consumer(self) -> None:
        """Stop push delivery; items are buffered again."""
        ...
