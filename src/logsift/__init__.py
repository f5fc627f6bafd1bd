"""logsift: time expression parsing and adaptive log sampling.

Turns loosely structured time expressions into validated epoch-second
ranges and nanosecond durations, composes backend search queries from
filter dimensions, and reduces fetched log records to a bounded,
representative sample.
"""

from logsift.clock import Clock, FrozenClock, SystemClock
from logsift.query import (
    LogQueryFilters,
    QueryCompositor,
    TraceQueryFilters,
    build_log_query,
    build_trace_query,
)
from logsift.sampling import (
    PatternNormalizer,
    SampleMode,
    SampleResult,
    Sampler,
    normalize_to_pattern,
    select_samples,
)
from logsift.temporal import (
    DurationParser,
    TimeExpressionParser,
    TimeRange,
    TimeRangeResolver,
    ensure_valid_time_range,
    parse_duration_ns,
    parse_time,
)

__version__ = "0.1.0"

__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "LogQueryFilters",
    "QueryCompositor",
    "TraceQueryFilters",
    "build_log_query",
    "build_trace_query",
    "PatternNormalizer",
    "SampleMode",
    "SampleResult",
    "Sampler",
    "normalize_to_pattern",
    "select_samples",
    "DurationParser",
    "TimeExpressionParser",
    "TimeRange",
    "TimeRangeResolver",
    "ensure_valid_time_range",
    "parse_duration_ns",
    "parse_time",
]
