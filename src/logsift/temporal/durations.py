"""Duration parsing for span-latency filters.

Converts human duration strings ("500ms", "1.5s", "2h") into integer
nanoseconds. Unparseable input yields ``None``, which callers treat as
"no duration filter requested".
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Dict, Optional, Union

DurationInput = Union[str, int, float, None]

# Nanoseconds per unit
UNIT_NANOSECONDS: Dict[str, int] = {
    "ns": 1,
    "µs": 1_000,      # U+00B5 micro sign
    "μs": 1_000,      # U+03BC greek mu
    "us": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60_000_000_000,
    "h": 3_600_000_000_000,
    "d": 86_400_000_000_000,
    "w": 604_800_000_000_000,
}

DURATION_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(ns|µs|μs|us|ms|s|m|h|d|w)?$", re.ASCII)


class DurationParser:
    """Parse duration strings into nanoseconds.

    Supported formats:
    - "100ns", "50us", "50µs", "500ms", "2s", "1.5s", "5m", "1h", "1d", "1w"
    - A bare number ("250") is taken as nanoseconds
    - Numeric input is assumed to already be nanoseconds
    """

    def parse(self, value: DurationInput) -> Optional[int]:
        """Parse ``value`` into nanoseconds.

        Args:
            value: Duration string, number of nanoseconds, or None

        Returns:
            Integer nanoseconds, or None if the input is absent or unparseable
        """
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            return value

        text = str(value).strip().lower()

        match = DURATION_PATTERN.match(text)
        if not match:
            return None

        magnitude = Decimal(match.group(1))
        unit = match.group(2) or "ns"
        return int(magnitude * UNIT_NANOSECONDS[unit])


def format_duration_ns(ns: int) -> str:
    """Render nanoseconds as a short human-readable duration."""
    if ns < 1_000:
        return f"{ns}ns"
    if ns < 1_000_000:
        return f"{ns / 1_000:.1f}µs"
    if ns < 1_000_000_000:
        return f"{ns / 1_000_000:.1f}ms"
    if ns < 60_000_000_000:
        return f"{ns / 1_000_000_000:.2f}s"
    return f"{ns / 60_000_000_000:.2f}m"


_DEFAULT_PARSER = DurationParser()


def parse_duration_ns(value: DurationInput) -> Optional[int]:
    """Convenience wrapper around ``DurationParser.parse``."""
    return _DEFAULT_PARSER.parse(value)
