# -*- coding: utf-8 -*-
"""Per-scope overrides supplied when a notification scope is created."""

from __future__ import annotations

from typing import Any, Callable, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

_logger = structlog.get_logger("ScopeConfig")


class ScopeConfig(BaseModel):
    """Optional overrides for one display context.

    Every field is optional. Unknown keys are ignored; a field whose value has
    the wrong shape is dropped (left as None) with a diagnostic instead of
    failing the whole config.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title_case: Optional[Callable[[str], str]] = None
    digest: Optional[Callable[..., Any]] = None
    alert_renderer: Optional[Callable[..., Any]] = None
    timeout_ms: Optional[int] = Field(default=None, ge=0, strict=True)
    default_message: Optional[str] = Field(default=None, strict=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_malformed(cls, value: Any, handler: Any, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError as exc:
            _logger.warning(
                "scope_config_field_ignored",
                field=info.field_name,
                value_type=type(value).__name__,
                error_count=exc.error_count(),
            )
            return None
