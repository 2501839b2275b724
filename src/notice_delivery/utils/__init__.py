# -*- coding: utf-8 -*-
"""Utility modules."""

from notice_delivery.utils.resolution import first_present
from notice_delivery.utils.strings import title_case

__all__ = ["first_present", "title_case"]
