"""Fixtures for temporal parsing tests."""

from __future__ import annotations

import os
import time

import pytest

from logsift.temporal.expressions import TimeExpressionParser


@pytest.fixture
def parser(frozen_clock) -> TimeExpressionParser:
    return TimeExpressionParser(frozen_clock)


@pytest.fixture
def local_timezone(monkeypatch):
    """Switch the process time zone for one test and restore it afterwards.

    Uses POSIX TZ strings so no tz database is needed.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set

    monkeypatch.undo()
    time.tzset()
