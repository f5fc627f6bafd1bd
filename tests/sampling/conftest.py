"""Fixtures for sampling tests."""

from __future__ import annotations

from typing import Dict, List

import pytest

from logsift.sampling.sampler import LogRecord


@pytest.fixture
def numbered_records() -> List[Dict[str, str]]:
    """Ten mapping records whose messages are all distinct patterns."""
    return [{"id": str(i), "message": f"event-{chr(ord('a') + i)}"} for i in range(10)]


@pytest.fixture
def five_pattern_records() -> List[LogRecord]:
    """100 records cycling through exactly five normalized patterns.

    Record ``i`` belongs to pattern ``i % 5``; only the request number,
    which normalizes to {N}, varies within a pattern.
    """
    templates = [
        "db timeout on request {n}",
        "cache miss for request {n}",
        "auth rejected request {n}",
        "upstream reset during request {n}",
        "queue full, dropped request {n}",
    ]
    return [
        LogRecord(message=templates[i % 5].format(n=10000 + i), timestamp=str(i))
        for i in range(100)
    ]
