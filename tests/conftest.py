"""Shared test fixtures."""

from __future__ import annotations

import pytest

from logsift.clock import FrozenClock

# 2024-01-15T12:00:00Z
FROZEN_NOW = 1705320000


@pytest.fixture
def frozen_now() -> int:
    return FROZEN_NOW


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Clock pinned to 2024-01-15T12:00:00Z."""
    return FrozenClock(FROZEN_NOW)
