# -*- coding: utf-8 -*-
"""Digest pipeline."""

from notice_delivery.digest.pipeline import DigestPipeline

__all__ = ["DigestPipeline"]
