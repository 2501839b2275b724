"""Configuration subpackage."""

from notice_delivery.config.config import (
    AppSettings,
    ConsolePresenterSettings,
    LoggingSettings,
    NoticeSettings,
    Settings,
    get_settings,
)
from notice_delivery.config.scope import ScopeConfig

__all__ = [
    "AppSettings",
    "ConsolePresenterSettings",
    "LoggingSettings",
    "NoticeSettings",
    "ScopeConfig",
    "Settings",
    "get_settings",
]
