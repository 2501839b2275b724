# -*- coding: utf-8 -*-
"""Notice: the unit of delivery from producers to the display slot.

A raw notice may leave any field unset; the digest pipeline fills them in and
marks the result as digested. Digested notices are final: the display layer
reads kind, title, message and timeout_ms without further defaulting.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

import structlog

_logger = structlog.get_logger("Notice")


class NoticeKind(str, Enum):
    """Known notice categories (styling only; any string is accepted as kind)."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Notice:
    """A single message payload awaiting or undergoing display."""

    kind: Optional[str] = None
    title: Optional[str] = None
    message: Optional[str] = None
    timeout_ms: Optional[int] = None
    """Display time in ms; 0 means never auto-dismiss, None means use the scope default."""

    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utc_now)
    digested: bool = False
    """Set by the digest pipeline; a digested notice is never digested again."""

    def __post_init__(self) -> None:
        if isinstance(self.kind, NoticeKind):
            object.__setattr__(self, "kind", self.kind.value)
        if self.timeout_ms is not None and not _is_valid_timeout(self.timeout_ms):
            raise ValueError(f"timeout_ms must be a non-negative int, got {self.timeout_ms!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Notice:
        """Build a notice from a plain mapping.

        Accepts ``type`` as an alias of ``kind`` and ``timeout`` as an alias of
        ``timeout_ms``. Unknown keys are ignored. A title or message that is not
        a string, or a timeout that is not a non-negative int, is dropped (left
        as None) with a diagnostic; this never raises.
        """
        kind = data.get("kind", data.get("type"))
        timeout = data.get("timeout_ms", data.get("timeout"))
        if timeout is not None and not _is_valid_timeout(timeout):
            _drop_field("timeout_ms", timeout)
            timeout = None
        text: dict[str, Optional[str]] = {}
        for name in ("title", "message"):
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                _drop_field(name, value)
                value = None
            text[name] = value
        return cls(
            kind=str(kind) if kind is not None else None,
            timeout_ms=timeout,
            **text,
        )

    def with_fields(self, **changes: Any) -> Notice:
        """Return a copy with the given fields replaced (id and created_at are kept)."""
        return replace(self, **changes)


def _is_valid_timeout(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _drop_field(name: str, value: Any) -> None:
    _logger.warning("notice_field_ignored", field=name, value_type=type(value).__name__)
