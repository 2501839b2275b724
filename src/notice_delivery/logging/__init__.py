"""Logging setup."""

from notice_delivery.logging.config import build_processors, configure_logging

__all__ = ["build_processors", "configure_logging"]
