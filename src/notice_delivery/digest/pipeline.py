# -*- coding: utf-8 -*-
"""Digest pipeline: turn a raw notice into a display-ready one.

Formatter, digest function, default message, renderer and timeout each
resolve through the same chain, first present wins:

    scope override -> registry value -> built-in default

A timeout of 0 is a real value (never auto-dismiss) and is never replaced.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import structlog

from notice_delivery.config import ScopeConfig, Settings, get_settings
from notice_delivery.models.notice import Notice
from notice_delivery.registry import (
    AlertRenderer,
    DigestFunction,
    NoticeRegistry,
    TitleFormatter,
    default_digest,
    get_registry,
    noop_renderer,
)
from notice_delivery.utils import first_present, title_case


class DigestPipeline:
    """Digest notices for one scope."""

    def __init__(
        self,
        registry: Optional[NoticeRegistry] = None,
        scope_config: Optional[ScopeConfig] = None,
        settings: Optional[Settings] = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._registry = registry if registry is not None else get_registry()
        self._scope = scope_config if scope_config is not None else ScopeConfig()
        self._settings = settings if settings is not None else get_settings()
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def title_case(self) -> TitleFormatter:
        return first_present(self._scope.title_case, self._registry.title_case, title_case)  # type: ignore[return-value]

    @property
    def digest_function(self) -> DigestFunction:
        return first_present(self._scope.digest, self._registry.digest, default_digest)  # type: ignore[return-value]

    @property
    def alert_renderer(self) -> AlertRenderer:
        return first_present(self._scope.alert_renderer, self._registry.alert_renderer, noop_renderer)  # type: ignore[return-value]

    @property
    def default_message(self) -> str:
        return first_present(  # type: ignore[return-value]
            self._scope.default_message,
            self._registry.default_message,
            self._settings.notices.default_message,
        )

    def resolve_timeout(self, notice: Notice) -> int:
        """Notice value, else scope default, else the settings fallback."""
        return first_present(  # type: ignore[return-value]
            notice.timeout_ms,
            self._scope.timeout_ms,
            self._settings.notices.default_timeout_ms,
        )

    def digest(self, notice: Notice) -> Notice:
        """Return the display-ready form of notice. Digested notices pass through unchanged."""
        if notice.digested:
            return notice

        default_message = self.default_message
        if not notice.kind:
            notice = notice.with_fields(kind=self._settings.notices.default_kind)

        digest_fn = self.digest_function
        result = digest_fn(notice, self.title_case, default_message)
        if not isinstance(result, Notice):
            self._logger.warning(
                "digest_returned_invalid_notice",
                result_type=type(result).__name__,
                notice_id=str(notice.id),
            )
            result = default_digest(notice, self.title_case, default_message)

        changes: dict[str, Any] = {"digested": True}
        if not result.kind:
            changes["kind"] = self._settings.notices.default_kind
        if result.message is None:
            changes["message"] = default_message
        changes["timeout_ms"] = self.resolve_timeout(result)
        digested = result.with_fields(**changes)
        self._logger.debug(
            "notice_digested",
            notice_id=str(digested.id),
            notice_kind=digested.kind,
            timeout_ms=digested.timeout_ms,
        )
        return digested
