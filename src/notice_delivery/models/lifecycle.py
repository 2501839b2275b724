# -*- coding: utf-8 -*-
"""Lifecycle state of a display slot and the view handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from notice_delivery.models.notice import Notice


class LifecycleState(str, Enum):
    """Display slot state."""

    IDLE = "IDLE"
    AWAITING = "AWAITING"
    DISPLAYING = "DISPLAYING"
    STOPPED = "STOPPED"


@dataclass(frozen=True, slots=True)
class AlertView:
    """What an alert renderer receives for one displayed notice."""

    notice: Notice
    close: Callable[[], None]
    """Dismiss this notice. Safe to call more than once."""

    timeout_ms: int
    queued: Callable[[], int]
    """Number of notices still waiting behind this one."""
