# -*- coding: utf-8 -*-
"""Process-wide notice defaults."""

from notice_delivery.registry.defaults import (
    DEFAULT_KIND,
    DEFAULT_MESSAGE,
    default_digest,
    noop_renderer,
)
from notice_delivery.registry.registry import (
    AlertRenderer,
    DigestFunction,
    NoticeRegistry,
    TitleFormatter,
    get_registry,
    set_registry,
)

__all__ = [
    "AlertRenderer",
    "DEFAULT_KIND",
    "DEFAULT_MESSAGE",
    "DigestFunction",
    "NoticeRegistry",
    "TitleFormatter",
    "default_digest",
    "get_registry",
    "noop_renderer",
    "set_registry",
]
