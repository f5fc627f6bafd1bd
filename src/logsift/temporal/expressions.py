"""Time expression parsing.

Resolves the loosely structured time expressions that automated callers
send (LLM agents in particular) into integer epoch seconds. Several small
grammars overlap, so they are tried in a fixed order and the first match
wins:

1. Simple relative:        "30s", "15m", "2h", "7d"
2. Relative with clock:    "3d@11:45:23", "1d@14:30", "2h 15:30"
3. Keyword with clock:     "today@09:30", "yesterday 14:00:00"
4. Absolute date-time:     "2024-01-15T11:45:23Z", "Jan 15 2024 10:00"
5. Epoch seconds string:   "1702656000"

Anything else resolves to the caller-supplied default. Parsing never raises.

Clock-time grammars work on the wall clock of the process's local time
zone, so "3d@11:45" means 11:45 local time three local days ago.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, time, timedelta, timezone
from typing import Optional, Union

from dateutil import parser as dateutil_parser

from logsift.clock import Clock, resolve_clock
from logsift.temporal.models import ParseOutcome, ParseSource

TimeInput = Union[str, int, float, None]


# ---------------------------------------------------------------------------
# Grammar Patterns
# ---------------------------------------------------------------------------

SIMPLE_RELATIVE_PATTERN = re.compile(r"^(\d+)([smhd])$", re.ASCII)

RELATIVE_CLOCK_PATTERN = re.compile(
    r"^(\d+)([dh])[@ ](\d{1,2}):(\d{2})(?::(\d{2}))?$", re.ASCII
)

KEYWORD_CLOCK_PATTERN = re.compile(
    r"^(today|yesterday)[@ ](\d{1,2}):(\d{2})(?::(\d{2}))?$",
    re.IGNORECASE | re.ASCII,
)

INTEGER_STRING_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
DATE_ONLY_PATTERN = re.compile(r"^[+-]?\d{4,6}(?:-\d{2}(?:-\d{2})?)?$", re.ASCII)

UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
}

KEYWORD_DAYS_AGO = {
    "today": 0,
    "yesterday": 1,
}

# Two distinct defaults let us detect strings that lack an explicit date
_PROBE_DEFAULT_A = datetime(2000, 1, 1)
_PROBE_DEFAULT_B = datetime(2001, 2, 2)


class TimeExpressionParser:
    """Parse time expressions into epoch seconds against an injected clock.

    Example:
        >>> parser = TimeExpressionParser(FrozenClock(1705320000))
        >>> parser.parse("2h", default=0)
        1705312800
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = resolve_clock(clock)

    @property
    def clock(self) -> Clock:
        return self._clock

    def parse(self, value: TimeInput, default: int) -> int:
        """Parse ``value`` into epoch seconds, or return ``default``."""
        return self.parse_detailed(value, default).value

    def parse_detailed(self, value: TimeInput, default: int) -> ParseOutcome:
        """Parse ``value`` and report which grammar produced the result.

        Args:
            value: Time expression, epoch seconds, or None
            default: Returned when the input is absent or unrecognized

        Returns:
            ParseOutcome whose ``value`` is always an integer
        """
        if value is None:
            return ParseOutcome(default, ParseSource.DEFAULT)

        if isinstance(value, bool):
            return ParseOutcome(default, ParseSource.FALLBACK)

        if isinstance(value, int):
            return ParseOutcome(value, ParseSource.NUMERIC)

        if isinstance(value, float):
            if not math.isfinite(value):
                return ParseOutcome(default, ParseSource.FALLBACK)
            return ParseOutcome(math.floor(value), ParseSource.NUMERIC)

        text = str(value).strip()

        try:
            match = SIMPLE_RELATIVE_PATTERN.match(text)
            if match:
                return ParseOutcome(
                    self._resolve_simple_relative(match), ParseSource.SIMPLE_RELATIVE
                )

            match = RELATIVE_CLOCK_PATTERN.match(text)
            if match:
                return ParseOutcome(
                    self._resolve_relative_clock(match), ParseSource.RELATIVE_CLOCK
                )

            match = KEYWORD_CLOCK_PATTERN.match(text)
            if match:
                return ParseOutcome(
                    self._resolve_keyword_clock(match), ParseSource.KEYWORD_CLOCK
                )
        except (OverflowError, OSError, ValueError):
            # Matched a grammar but the offset leaves the representable range
            return ParseOutcome(default, ParseSource.FALLBACK)

        absolute = self._parse_absolute(text)
        if absolute is not None:
            return ParseOutcome(absolute, ParseSource.ABSOLUTE)

        match = INTEGER_STRING_PATTERN.match(text)
        if match:
            return ParseOutcome(int(match.group(0)), ParseSource.EPOCH_STRING)

        return ParseOutcome(default, ParseSource.FALLBACK)

    # -----------------------------------------------------------------------
    # Private: Relative Grammars
    # -----------------------------------------------------------------------

    def _now_seconds(self) -> int:
        return math.floor(self._clock.now())

    def _local_now(self) -> datetime:
        return datetime.fromtimestamp(self._clock.now())

    def _local_midnight(self, days_ago: int) -> datetime:
        today = self._local_now().date()
        return datetime.combine(today - timedelta(days=days_ago), time())

    def _resolve_simple_relative(self, match: re.Match) -> int:
        amount = int(match.group(1))
        return self._now_seconds() - amount * UNIT_SECONDS[match.group(2)]

    def _resolve_relative_clock(self, match: re.Match) -> int:
        amount = int(match.group(1))
        unit = match.group(2)
        hours = int(match.group(3))
        minutes = int(match.group(4))
        seconds = int(match.group(5) or 0)

        if unit == "d":
            moment = self._local_midnight(amount) + timedelta(
                hours=hours, minutes=minutes, seconds=seconds
            )
            return _local_epoch(moment)

        # Hour offsets keep the hour of (now - N hours); only minute and
        # second come from the expression.
        shifted = self._local_now() - timedelta(hours=amount)
        moment = shifted.replace(minute=0, second=0, microsecond=0) + timedelta(
            minutes=minutes, seconds=seconds
        )
        return _local_epoch(moment)

    def _resolve_keyword_clock(self, match: re.Match) -> int:
        days_ago = KEYWORD_DAYS_AGO[match.group(1).lower()]
        hours = int(match.group(2))
        minutes = int(match.group(3))
        seconds = int(match.group(4) or 0)

        moment = self._local_midnight(days_ago) + timedelta(
            hours=hours, minutes=minutes, seconds=seconds
        )
        return _local_epoch(moment)

    # -----------------------------------------------------------------------
    # Private: Absolute Timestamps
    # -----------------------------------------------------------------------

    def _parse_absolute(self, text: str) -> Optional[int]:
        """Parse a calendar date-time, or None when the text is not one."""
        if not text or INTEGER_STRING_PATTERN.match(text):
            return None

        try:
            parsed = dateutil_parser.isoparse(text)
        except (ValueError, OverflowError):
            parsed = _parse_calendar_text(text)
            if parsed is None:
                return None
        else:
            if parsed.tzinfo is None and DATE_ONLY_PATTERN.match(text):
                parsed = parsed.replace(tzinfo=timezone.utc)

        try:
            return math.floor(parsed.timestamp())
        except (OverflowError, OSError, ValueError):
            return None


def _local_epoch(moment: datetime) -> int:
    """Epoch seconds for a naive datetime read as local wall-clock time."""
    return math.floor(moment.timestamp())


def _parse_calendar_text(text: str) -> Optional[datetime]:
    """Parse free-form date text, requiring an explicit year, month and day."""
    try:
        first = dateutil_parser.parse(text, default=_PROBE_DEFAULT_A)
        second = dateutil_parser.parse(text, default=_PROBE_DEFAULT_B)
    except (ValueError, OverflowError):
        return None

    if first.date() != second.date():
        return None
    return first


def parse_time(value: TimeInput, default: int, clock: Optional[Clock] = None) -> int:
    """Convenience wrapper around ``TimeExpressionParser.parse``."""
    return TimeExpressionParser(clock).parse(value, default)
