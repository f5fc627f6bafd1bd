"""Backend query composition for log and trace searches."""

from logsift.query.compositor import (
    WILDCARD_QUERY,
    LogQueryFilters,
    QueryCompositor,
    build_log_query,
)
from logsift.query.traces import (
    TraceQueryCompositor,
    TraceQueryFilters,
    build_http_status_filter,
    build_trace_query,
)

__all__ = [
    "WILDCARD_QUERY",
    "LogQueryFilters",
    "QueryCompositor",
    "build_log_query",
    "TraceQueryCompositor",
    "TraceQueryFilters",
    "build_http_status_filter",
    "build_trace_query",
]
