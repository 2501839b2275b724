# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterator
from typing import Any
from unittest.mock import Mock

import pytest

from notice_delivery.config import Settings
from notice_delivery.registry import NoticeRegistry, set_registry


@pytest.fixture(autouse=True)
def _isolated_registry() -> Iterator[None]:
    """Every test starts and ends with a lazily re-created process registry."""
    set_registry(None)
    yield
    set_registry(None)


@pytest.fixture
def settings() -> Settings:
    """Settings with built-in defaults (no .env file)."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def registry() -> NoticeRegistry:
    """Fresh registry per test."""
    return NoticeRegistry()


@pytest.fixture
def logger() -> Mock:
    """Mock structlog logger."""
    return Mock()


@pytest.fixture
def get_logger(logger: Mock) -> Callable[[str], Any]:
    """Logger factory returning the shared mock logger."""
    return lambda name: logger


@pytest.fixture
def wait_until() -> Callable[..., Awaitable[None]]:
    """Poll a predicate on the running loop until it holds (fail after timeout seconds)."""

    async def _wait(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not predicate():
            if loop.time() > deadline:
                raise AssertionError("condition not met before timeout")
            await asyncio.sleep(0.001)

    return _wait
