"""Typed settings for logsift.

Limits that callers apply around the core (default result sizes, the
default look-back window, the minimum range width) live in Pydantic models
so they are validated once. Settings may come from a JSON file, an explicit
overrides mapping, or ``LOGSIFT_*`` environment variables, in that order of
increasing precedence. Nothing is ever written back to disk.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from logsift.errors import ConfigurationError

logger = logging.getLogger(__name__)


class LimitsSettings(BaseModel):
    """Result-size and time-window limits."""

    default_limit: int = Field(25, ge=1, description="Records returned when no limit is given")
    max_log_lines: int = Field(100, ge=1, description="Upper bound on records fetched per request")
    default_time_range_hours: int = Field(24, ge=1, description="Look-back window when 'from' is absent")
    min_span_seconds: int = Field(60, ge=1, description="Minimum width of a resolved time range")
    fetch_multiplier: int = Field(4, ge=1, description="Over-fetch factor for spread/diverse sampling")

    @model_validator(mode="after")
    def _check_default_limit(self) -> "LimitsSettings":
        if self.default_limit > self.max_log_lines:
            raise ValueError("default_limit must not exceed max_log_lines")
        return self


class Settings(BaseModel):
    """Root configuration state."""

    limits: LimitsSettings = Field(default_factory=LimitsSettings)


def load_settings(path: Path) -> Settings:
    """Load settings from disk or raise if invalid."""

    if not path.exists():
        raise ConfigurationError(
            f"Settings file not found at {path}", details={"path": str(path)}
        )
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            f"Settings file {path} is not valid JSON: {exc}", details={"path": str(path)}
        ) from exc
    return _validate(payload)


def bootstrap_settings(
    *,
    path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Build effective settings from defaults, a file, overrides and environment."""

    overrides = overrides or {}

    if path is not None and path.exists():
        settings = load_settings(path)
    else:
        if path is not None:
            logger.debug(f"No settings file at {path}, using defaults")
        settings = Settings()

    merged = settings.model_dump(mode="python")
    merged = _apply_overrides(merged, overrides)
    merged = _apply_env_overrides(merged)
    return _validate(merged)


def _validate(payload: Any) -> Settings:
    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = base.copy()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    limits = data.setdefault("limits", {})
    _set_env_override(limits, "default_limit", "LOGSIFT_DEFAULT_LIMIT")
    _set_env_override(limits, "max_log_lines", "LOGSIFT_MAX_LOG_LINES")
    _set_env_override(limits, "default_time_range_hours", "LOGSIFT_DEFAULT_TIME_RANGE_HOURS")
    _set_env_override(limits, "min_span_seconds", "LOGSIFT_MIN_SPAN_SECONDS")
    _set_env_override(limits, "fetch_multiplier", "LOGSIFT_FETCH_MULTIPLIER")
    return data


def _set_env_override(mapping: Dict[str, Any], key: str, env_name: str) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    try:
        mapping[key] = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{env_name} must be an integer, got {raw!r}", details={"variable": env_name}
        ) from exc
