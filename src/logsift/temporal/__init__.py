"""Temporal parsing for logsift.

- Time expression parsing (relative offsets, clock times, absolute dates)
- Time range normalization and default-window resolution
- Duration parsing into nanoseconds
"""

from logsift.temporal.models import (
    ParseOutcome,
    ParseSource,
    TimeRange,
)

from logsift.temporal.durations import (
    DurationParser,
    format_duration_ns,
    parse_duration_ns,
)

from logsift.temporal.expressions import (
    TimeExpressionParser,
    parse_time,
)

from logsift.temporal.ranges import (
    TimeRangeResolver,
    ensure_valid_time_range,
)

__all__ = [
    # Values
    "ParseOutcome",
    "ParseSource",
    "TimeRange",
    # Durations
    "DurationParser",
    "format_duration_ns",
    "parse_duration_ns",
    # Expressions
    "TimeExpressionParser",
    "parse_time",
    # Ranges
    "TimeRangeResolver",
    "ensure_valid_time_range",
]
