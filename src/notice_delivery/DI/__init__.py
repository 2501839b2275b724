"""Dependency injection."""

from notice_delivery.DI.container import Container

__all__ = ["Container"]
