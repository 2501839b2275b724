# -*- coding: utf-8 -*-
"""Base alert renderer strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from notice_delivery.models.lifecycle import AlertView

if TYPE_CHECKING:  # pragma: no cover
    from notice_delivery.config.config import Settings


class BaseAlertRenderer(ABC):
    """Abstract base for alert renderers.

    Instances are callables, so they can be stored in the registry's
    alert_renderer slot or passed as a scope override.
    """

    def __init__(self, settings: "Settings"):
        """
        Args:
            settings: Global configuration (Settings).
        """
        self.settings = settings

    def __call__(self, view: AlertView) -> None:
        self.render(view)

    @abstractmethod
    def render(self, view: AlertView) -> None:
        """
        Show one digested notice.

        Args:
            view: The notice plus its close callback, timeout and queued-count accessor.
        """
        pass
