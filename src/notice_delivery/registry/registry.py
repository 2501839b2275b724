# -*- coding: utf-8 -*-
"""Process-wide notice defaults shared by every scope without an override."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

import structlog

from notice_delivery.config import get_settings
from notice_delivery.exceptions import ConfigurationShapeError
from notice_delivery.registry.defaults import (
    DEFAULT_MESSAGE,
    default_digest,
    noop_renderer,
)
from notice_delivery.utils.strings import title_case

TitleFormatter = Callable[[str], str]
DigestFunction = Callable[..., Any]
AlertRenderer = Callable[..., Any]


class NoticeRegistry:
    """Four resettable slots: title formatter, digest, alert renderer, default message.

    Setters validate the shape of their argument. A mismatch is logged and
    ignored; the slot keeps its previous value. Setters and reset() hold a
    lock so each change is atomic.
    """

    def __init__(
        self,
        default_message: Optional[str] = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._lock = threading.Lock()
        self._title_case: TitleFormatter = title_case
        self._digest: DigestFunction = default_digest
        self._alert_renderer: AlertRenderer = noop_renderer
        self._builtin_message = default_message if default_message is not None else DEFAULT_MESSAGE
        self._default_message: str = self._builtin_message

    @property
    def title_case(self) -> TitleFormatter:
        return self._title_case

    @property
    def digest(self) -> DigestFunction:
        return self._digest

    @property
    def alert_renderer(self) -> AlertRenderer:
        return self._alert_renderer

    @property
    def default_message(self) -> str:
        return self._default_message

    def set_title_case(self, func: Any) -> bool:
        """Set the default title formatter. Returns False (and logs) if func is not callable."""
        return self._set("title_case", func, _require_callable)

    def set_digest(self, func: Any) -> bool:
        """Set the default digest function. Returns False (and logs) if func is not callable."""
        return self._set("digest", func, _require_callable)

    def set_alert_renderer(self, func: Any) -> bool:
        """Set the default alert renderer. Returns False (and logs) if func is not callable."""
        return self._set("alert_renderer", func, _require_callable)

    def set_default_message(self, message: Any) -> bool:
        """Set the default message text. Returns False (and logs) if message is not a str."""
        return self._set("default_message", message, _require_str)

    def reset(self) -> None:
        """Restore every slot to its built-in default (the constructor message for default_message)."""
        with self._lock:
            self._title_case = title_case
            self._digest = default_digest
            self._alert_renderer = noop_renderer
            self._default_message = self._builtin_message
        self._logger.debug("registry_reset")

    def _set(self, slot: str, value: Any, check: Callable[[str, Any], None]) -> bool:
        try:
            check(slot, value)
        except ConfigurationShapeError as exc:
            self._logger.warning(
                "registry_setter_rejected",
                slot=exc.slot,
                expected=exc.expected,
                value_type=exc.value_type,
            )
            return False
        with self._lock:
            setattr(self, f"_{slot}", value)
        self._logger.debug("registry_slot_set", slot=slot)
        return True


def _require_callable(slot: str, value: Any) -> None:
    if not callable(value):
        raise ConfigurationShapeError(
            f"{slot} must be callable",
            slot=slot,
            expected="callable",
            value=value,
        )


def _require_str(slot: str, value: Any) -> None:
    if not isinstance(value, str):
        raise ConfigurationShapeError(
            f"{slot} must be a string",
            slot=slot,
            expected="str",
            value=value,
        )


_registry: NoticeRegistry | None = None


def get_registry() -> NoticeRegistry:
    """Return the process-wide registry. Created on first call from get_settings()."""
    global _registry
    if _registry is None:
        _registry = NoticeRegistry(default_message=get_settings().notices.default_message)
    return _registry


def set_registry(registry: NoticeRegistry | None) -> None:
    """Set the process-wide registry (e.g. for testing or DI). None resets to lazy default."""
    global _registry
    _registry = registry
