# -*- coding: utf-8 -*-
"""Unit tests for DetachedNotices and the console presentation strategies."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest

from notice_delivery.config import Settings
from notice_delivery.models import AlertView, Notice
from notice_delivery.notifications import (
    ConsoleAlertRenderer,
    ConsolePresenter,
    DetachedNotices,
    PlainNoticeStyler,
)
from notice_delivery.registry import NoticeRegistry
from notice_delivery.scope import get_notices


def _detached(registry: NoticeRegistry, presenter: Any, settings: Settings, **kwargs: Any) -> DetachedNotices:
    return DetachedNotices(registry=registry, presenter=presenter, settings=settings, **kwargs)


def test_accept_presents_immediately_with_title_cased_kind_and_title(
    registry: NoticeRegistry,
    settings: Settings,
) -> None:
    presenter = Mock()
    notices = _detached(registry, presenter, settings)

    notices.accept({"type": "danger", "title": "opps i did it again!", "message": "Hit me baby"})

    presenter.present.assert_called_once_with("Danger\nOpps I Did It Again!\nHit me baby")


def test_accept_without_message_uses_registry_default(
    registry: NoticeRegistry,
    settings: Settings,
) -> None:
    presenter = Mock()
    notices = _detached(registry, presenter, settings)
    registry.set_default_message("Nothing to see")

    notices.accept(Notice())

    presenter.present.assert_called_once_with("Nothing to see")


def test_accept_logs_detached_diagnostic(
    registry: NoticeRegistry,
    settings: Settings,
    logger: Mock,
    get_logger: Callable[[str], Any],
) -> None:
    notices = _detached(registry, Mock(), settings, get_logger=get_logger)

    notices.accept(Notice(message="x"))

    assert logger.warning.call_args.args[0] == "notices_detached_accept"


def test_get_notices_outside_scope_prints_notice(capsys: pytest.CaptureFixture[str]) -> None:
    get_notices().accept({"kind": "info", "message": "printed"})

    assert "Info\nprinted" in capsys.readouterr().out


def test_console_presenter_logs_when_console_disabled(
    logger: Mock,
    get_logger: Callable[[str], Any],
) -> None:
    settings = Settings(_env_file=None, console={"enabled": False})  # type: ignore[call-arg]
    write = Mock()
    presenter = ConsolePresenter(settings, write=write, get_logger=get_logger)

    presenter.present("hidden")

    write.assert_not_called()
    logger.info.assert_called_once_with("notice_presented", text="hidden")


def test_console_alert_renderer_writes_body_and_queue_status(settings: Settings) -> None:
    write = Mock()
    renderer = ConsoleAlertRenderer(settings, PlainNoticeStyler(), write=write)
    view = AlertView(
        notice=Notice(kind="success", title="Saved", message="All good", timeout_ms=3000),
        close=Mock(),
        timeout_ms=3000,
        queued=lambda: 2,
    )

    renderer(view)

    write.assert_called_once_with("Success\nSaved\nAll good\n[2 queued, 3000 ms]")


def test_console_alert_renderer_marks_sticky_notices(settings: Settings) -> None:
    write = Mock()
    renderer = ConsoleAlertRenderer(settings, PlainNoticeStyler(), write=write)
    view = AlertView(
        notice=Notice(message="stay", timeout_ms=0),
        close=Mock(),
        timeout_ms=0,
        queued=lambda: 0,
    )

    renderer.render(view)

    write.assert_called_once_with("stay\n[0 queued, until closed]")


def test_console_alert_renderer_is_silent_when_disabled() -> None:
    settings = Settings(_env_file=None, console={"enabled": False})  # type: ignore[call-arg]
    write = Mock()
    renderer = ConsoleAlertRenderer(settings, PlainNoticeStyler(), write=write)

    renderer(AlertView(notice=Notice(message="x"), close=Mock(), timeout_ms=0, queued=lambda: 0))

    write.assert_not_called()


def test_accept_presents_mapping_with_malformed_timeout(
    registry: NoticeRegistry,
    settings: Settings,
) -> None:
    presenter = Mock()
    notices = _detached(registry, presenter, settings)

    notices.accept({"kind": "warning", "message": "still shown", "timeout": -5})

    presenter.present.assert_called_once_with("Warning\nstill shown")
