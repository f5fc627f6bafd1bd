"""APM trace query composition.

Same clause-joining rules as log queries, with trace-specific dimensions:
span durations (converted to nanoseconds), HTTP status ranges and
wildcard error matching.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Union

from logsift.query.compositor import escape_quotes, join_clauses
from logsift.temporal.durations import DurationParser


@dataclass(frozen=True)
class TraceQueryFilters:
    """Filter dimensions for a span search."""

    query: Optional[str] = None
    service: Optional[str] = None
    operation: Optional[str] = None
    resource: Optional[str] = None
    status: Optional[str] = None           # "ok" / "error"
    env: Optional[str] = None
    min_duration: Optional[str] = None     # e.g. "500ms"
    max_duration: Optional[str] = None
    http_status: Optional[str] = None      # "404", "5xx", ">=500"
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TraceQueryFilters":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# (filter attribute, backend field)
TRACE_FIELD_FILTERS = (
    ("service", "service"),
    ("operation", "operation_name"),
    ("resource", "resource_name"),
    ("status", "status"),
    ("env", "env"),
)


def build_http_status_filter(http_status: str) -> str:
    """Translate an HTTP status expression into a status-code clause.

    Handles class ranges ("5xx"), comparisons (">=500", "<400") and exact
    codes ("404").
    """
    status = http_status.strip().lower()

    if status.endswith("xx") and status[:1].isdigit():
        base = int(status[0]) * 100
        return f"@http.status_code:[{base} TO {base + 99}]"
    if status.startswith(">="):
        return f"@http.status_code:>={status[2:]}"
    if status.startswith(">"):
        return f"@http.status_code:>{status[1:]}"
    if status.startswith("<="):
        return f"@http.status_code:<={status[2:]}"
    if status.startswith("<"):
        return f"@http.status_code:<{status[1:]}"

    return f"@http.status_code:{http_status}"


class TraceQueryCompositor:
    """Compose a span search query from filter dimensions."""

    def __init__(self, duration_parser: Optional[DurationParser] = None):
        self.duration_parser = duration_parser or DurationParser()

    def build(self, filters: Union[TraceQueryFilters, Mapping[str, Any], None] = None) -> str:
        if filters is None:
            filters = TraceQueryFilters()
        elif not isinstance(filters, TraceQueryFilters):
            filters = TraceQueryFilters.from_mapping(filters)

        parts: List[str] = []

        if filters.query:
            parts.append(filters.query)

        for attr, field_name in TRACE_FIELD_FILTERS:
            value = getattr(filters, attr)
            if value:
                parts.append(f"{field_name}:{value}")

        # Unparseable durations add no clause
        if filters.min_duration:
            ns = self.duration_parser.parse(filters.min_duration)
            if ns is not None:
                parts.append(f"@duration:>={ns}")
        if filters.max_duration:
            ns = self.duration_parser.parse(filters.max_duration)
            if ns is not None:
                parts.append(f"@duration:<={ns}")

        if filters.http_status:
            parts.append(build_http_status_filter(filters.http_status))

        if filters.error_type:
            parts.append(f"error.type:*{escape_quotes(filters.error_type)}*")
        if filters.error_message:
            parts.append(f"error.message:*{escape_quotes(filters.error_message)}*")

        return join_clauses(parts)


def build_trace_query(
    filters: Union[TraceQueryFilters, Mapping[str, Any], None] = None,
    **dimensions: Any,
) -> str:
    """Build a trace query from filters and/or keyword dimensions."""
    if dimensions:
        base: dict = {}
        if isinstance(filters, TraceQueryFilters):
            base = {f.name: getattr(filters, f.name) for f in fields(TraceQueryFilters)}
        elif filters is not None:
            base = dict(filters)
        base.update(dimensions)
        filters = base
    return TraceQueryCompositor().build(filters)
