"""Notice delivery: async single-slot notice queue, digest pipeline and display lifecycle."""

from notice_delivery.config import ScopeConfig, get_settings
from notice_delivery.DI import Container
from notice_delivery.digest import DigestPipeline
from notice_delivery.lifecycle import NoticeLifecycle
from notice_delivery.models import AlertView, LifecycleState, Notice, NoticeKind
from notice_delivery.queue import NoticeQueue
from notice_delivery.registry import NoticeRegistry, get_registry, set_registry
from notice_delivery.scope import NotificationScope, get_notices

__version__ = "0.0.1"
__all__ = [
    "AlertView",
    "Container",
    "DigestPipeline",
    "LifecycleState",
    "Notice",
    "NoticeKind",
    "NoticeLifecycle",
    "NoticeQueue",
    "NoticeRegistry",
    "NotificationScope",
    "ScopeConfig",
    "get_notices",
    "get_registry",
    "get_settings",
    "set_registry",
]
