"""Temporal value types.

Defines the small immutable values produced by the temporal parsers:
- ``TimeRange``: a well-formed (start, end) pair of epoch seconds
- ``ParseOutcome``: a parsed value together with the grammar that produced it
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Tuple


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ParseSource(Enum):
    """Which grammar (if any) produced a parsed time value."""

    DEFAULT = "default"                    # Input absent, caller default used
    NUMERIC = "numeric"                    # Numeric input passed through
    SIMPLE_RELATIVE = "simple_relative"    # "30s", "2h", "7d"
    RELATIVE_CLOCK = "relative_clock"      # "3d@11:45:23", "2h 15:30"
    KEYWORD_CLOCK = "keyword_clock"        # "today@09:30", "yesterday 14:00"
    ABSOLUTE = "absolute"                  # ISO 8601 / calendar date-time
    EPOCH_STRING = "epoch_string"          # "1702656000"
    FALLBACK = "fallback"                  # Unrecognized, caller default used


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing a time expression.

    ``value`` is always usable; ``source`` records whether it came from the
    input or from the caller's default.
    """

    value: int
    source: ParseSource

    @property
    def fell_back(self) -> bool:
        """True when the value is the caller default despite input being present."""
        return self.source is ParseSource.FALLBACK

    @property
    def used_default(self) -> bool:
        return self.source in (ParseSource.DEFAULT, ParseSource.FALLBACK)


def _iso_utc(epoch_seconds: int) -> str:
    return (
        datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


@dataclass(frozen=True)
class TimeRange:
    """Ordered pair of epoch seconds with ``start < end``."""

    start: int
    end: int

    @property
    def span_seconds(self) -> int:
        return self.end - self.start

    def as_tuple(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def to_iso(self) -> Tuple[str, str]:
        """Both bounds as UTC ISO 8601 strings (``2024-01-15T12:00:00.000Z``)."""
        return (_iso_utc(self.start), _iso_utc(self.end))
