# -*- coding: utf-8 -*-
"""Unit tests for NoticeQueue."""

from __future__ import annotations

import asyncio
from unittest.mock import Mock

import pytest

from notice_delivery.exceptions import QueueEmpty
from notice_delivery.models import Notice
from notice_delivery.queue import NoticeQueue


def _notices(count: int) -> list[Notice]:
    return [Notice(message=f"m{i}") for i in range(count)]


async def test_next_resolves_buffered_notices_in_accept_order() -> None:
    queue = NoticeQueue[Notice]()
    notices = _notices(4)
    for notice in notices:
        queue.accept(notice)

    received = [await queue.next() for _ in notices]

    assert received == notices
    assert queue.size() == 0


async def test_next_on_non_empty_buffer_returns_resolved_handle() -> None:
    first, second = _notices(2)
    queue = NoticeQueue[Notice](first, second)

    handle = queue.next()

    assert handle.done()
    assert handle.result() is first
    assert queue.size() == 1
    assert not queue.has_waiter()


async def test_repeated_next_while_waiting_returns_same_handle() -> None:
    queue = NoticeQueue[Notice]()

    first = queue.next()
    second = queue.next()

    assert first is second
    assert queue.has_waiter()


async def test_single_accept_resolves_shared_handle_once_without_buffering() -> None:
    queue = NoticeQueue[Notice]()
    handle_a = queue.next()
    handle_b = queue.next()
    (notice,) = _notices(1)

    queue.accept(notice)

    assert await handle_a is notice
    assert await handle_b is notice
    assert queue.size() == 0
    assert not queue.has_waiter()


async def test_handoff_notice_precedes_later_accepts() -> None:
    queue = NoticeQueue[Notice]()
    first, second, third = _notices(3)
    handle = queue.next()

    queue.accept(first)
    queue.accept(second)
    queue.accept(third)

    assert await handle is first
    assert await queue.next() is second
    assert await queue.next() is third


async def test_clear_promise_cancels_wait_and_next_accept_is_buffered() -> None:
    queue = NoticeQueue[Notice]()
    handle = queue.next()
    (notice,) = _notices(1)

    queue.clear_promise()
    queue.accept(notice)

    assert handle.cancelled()
    assert queue.size() == 1
    assert queue.next() is not handle


async def test_clear_promise_is_noop_without_wait_or_after_resolution() -> None:
    queue = NoticeQueue[Notice]()
    queue.clear_promise()

    handle = queue.next()
    (notice,) = _notices(1)
    queue.accept(notice)
    queue.clear_promise()
    queue.clear_promise()

    assert handle.result() is notice
    assert not handle.cancelled()


async def test_cancelled_waiting_task_releases_the_slot() -> None:
    queue = NoticeQueue[Notice]()

    async def _consume() -> Notice:
        return await queue.next()

    task = asyncio.create_task(_consume())
    await asyncio.sleep(0)
    assert queue.has_waiter()

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert not queue.has_waiter()
    (notice,) = _notices(1)
    queue.accept(notice)
    assert queue.size() == 1


def test_initial_items_are_flattened_in_order() -> None:
    a, b, c, d = _notices(4)

    queue = NoticeQueue[Notice](a, [b, c], d)

    assert queue.flush() == [a, b, c, d]


def test_shift_queued_size_and_len() -> None:
    a, b = _notices(2)
    queue = NoticeQueue[Notice](a, b)

    assert queue.queued() is True
    assert len(queue) == 2
    assert queue.shift() is a
    assert queue.shift() is b
    assert queue.shift() is None
    assert queue.queued() is False
    assert queue.size() == 0


def test_shift_nowait_raises_when_empty() -> None:
    queue = NoticeQueue[Notice]()

    with pytest.raises(QueueEmpty):
        queue.shift_nowait()


def test_flush_empties_buffer_and_returns_contents() -> None:
    a, b = _notices(2)
    queue = NoticeQueue[Notice](a, b)

    items = queue.flush()

    assert items == [a, b]
    assert queue.size() == 0
    assert queue.flush() == []


def test_push_consumer_receives_items_instead_of_buffer() -> None:
    consumer = Mock()
    queue = NoticeQueue[Notice]()
    queue.attach_consumer(consumer)
    (notice,) = _notices(1)

    queue.accept(notice)

    consumer.assert_called_once_with(notice)
    assert queue.size() == 0

    queue.detach_consumer()
    queue.accept(notice)
    assert queue.size() == 1


async def test_outstanding_wait_takes_precedence_over_push_consumer() -> None:
    consumer = Mock()
    queue = NoticeQueue[Notice]()
    queue.attach_consumer(consumer)
    handle = queue.next()
    (notice,) = _notices(1)

    queue.accept(notice)

    assert await handle is notice
    consumer.assert_not_called()
