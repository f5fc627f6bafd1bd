"""Configuration loading utilities for logsift."""

from .settings import (
    LimitsSettings,
    Settings,
    bootstrap_settings,
    load_settings,
)

__all__ = [
    "LimitsSettings",
    "Settings",
    "bootstrap_settings",
    "load_settings",
]
