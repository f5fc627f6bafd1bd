"""Time range normalization.

``ensure_valid_time_range`` turns any (from, to) pair into a well-formed
range: reversed bounds are swapped and narrow ranges are widened to a
minimum span. ``TimeRangeResolver`` combines it with expression parsing and
the configured default window, which is how request-building callers turn
raw ``from``/``to`` strings into bounds.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from logsift.clock import Clock, hours_ago, now_seconds, resolve_clock
from logsift.configuration.settings import LimitsSettings
from logsift.temporal.expressions import TimeExpressionParser, TimeInput
from logsift.temporal.models import TimeRange

logger = logging.getLogger(__name__)

DEFAULT_MIN_SPAN_SECONDS = 60


def ensure_valid_time_range(
    start: int,
    end: int,
    min_span_seconds: int = DEFAULT_MIN_SPAN_SECONDS,
) -> Tuple[int, int]:
    """Return ``(start, end)`` with ``start < end`` and at least ``min_span_seconds`` apart.

    A reversed pair is treated as an ordering mistake and swapped; a range
    narrower than the minimum keeps its start and has its end pushed out.
    """
    if start > end:
        start, end = end, start

    span = max(min_span_seconds, 1)
    if end - start < span:
        end = start + span

    return start, end


class TimeRangeResolver:
    """Resolve raw from/to expressions into a validated ``TimeRange``.

    Absent or unrecognized bounds fall back to the last
    ``default_time_range_hours`` ending now.
    """

    def __init__(
        self,
        limits: Optional[LimitsSettings] = None,
        clock: Optional[Clock] = None,
    ):
        self.limits = limits or LimitsSettings()
        self._clock = resolve_clock(clock)
        self._parser = TimeExpressionParser(self._clock)

    def resolve(self, from_expr: TimeInput = None, to_expr: TimeInput = None) -> TimeRange:
        """Parse both bounds and normalize them into a range.

        Args:
            from_expr: Start expression (defaults to the configured look-back)
            to_expr: End expression (defaults to now)

        Returns:
            TimeRange satisfying the configured minimum span
        """
        default_from = hours_ago(self.limits.default_time_range_hours, self._clock)
        default_to = now_seconds(self._clock)

        start = self._parser.parse_detailed(from_expr, default_from)
        end = self._parser.parse_detailed(to_expr, default_to)

        if start.fell_back:
            logger.debug(f"Unrecognized 'from' expression {from_expr!r}, using default {default_from}")
        if end.fell_back:
            logger.debug(f"Unrecognized 'to' expression {to_expr!r}, using default {default_to}")

        valid_start, valid_end = ensure_valid_time_range(
            start.value, end.value, self.limits.min_span_seconds
        )
        if (valid_start, valid_end) != (start.value, end.value):
            logger.debug(
                f"Adjusted time range ({start.value}, {end.value}) -> ({valid_start}, {valid_end})"
            )
        return TimeRange(valid_start, valid_end)
