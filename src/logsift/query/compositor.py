"""Log query composition.

Merges independently specified filter dimensions into one search string
for the log backend. Clause order is fixed so the same filters always
produce the same query:

    <query> "<keyword>" @message:~"<pattern>" service:<s> host:<h> status:<st>

Field values (service, host, status) are emitted verbatim; callers are
expected to pass plain tokens.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Union

WILDCARD_QUERY = "*"


def escape_quotes(value: str) -> str:
    """Escape double quotes for use inside a quoted phrase."""
    return value.replace('"', '\\"')


def join_clauses(parts: List[str]) -> str:
    return " ".join(parts) if parts else WILDCARD_QUERY


@dataclass(frozen=True)
class LogQueryFilters:
    """Filter dimensions for a log search."""

    query: Optional[str] = None        # Raw backend query, used as-is
    keyword: Optional[str] = None      # Exact phrase (grep-like)
    pattern: Optional[str] = None      # Regex matched against the message
    service: Optional[str] = None
    host: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LogQueryFilters":
        """Build filters from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


FIELD_FILTERS = ("service", "host", "status")


class QueryCompositor:
    """Compose a log search query from filter dimensions."""

    def build(self, filters: Union[LogQueryFilters, Mapping[str, Any], None] = None) -> str:
        """Build the query string.

        Args:
            filters: LogQueryFilters or an equivalent mapping

        Returns:
            Space-joined clauses, or "*" when no dimension is set
        """
        if filters is None:
            filters = LogQueryFilters()
        elif not isinstance(filters, LogQueryFilters):
            filters = LogQueryFilters.from_mapping(filters)

        parts: List[str] = []

        if filters.query:
            parts.append(filters.query)

        if filters.keyword:
            parts.append(f'"{escape_quotes(filters.keyword)}"')

        if filters.pattern:
            parts.append(f'@message:~"{escape_quotes(filters.pattern)}"')

        for name in FIELD_FILTERS:
            value = getattr(filters, name)
            if value:
                parts.append(f"{name}:{value}")

        return join_clauses(parts)


_DEFAULT_COMPOSITOR = QueryCompositor()


def build_log_query(
    filters: Union[LogQueryFilters, Mapping[str, Any], None] = None,
    **dimensions: Any,
) -> str:
    """Build a log query from filters and/or keyword dimensions.

    Keyword arguments override matching entries in ``filters``.
    """
    if dimensions:
        base: dict = {}
        if isinstance(filters, LogQueryFilters):
            base = {f.name: getattr(filters, f.name) for f in fields(LogQueryFilters)}
        elif filters is not None:
            base = dict(filters)
        base.update(dimensions)
        filters = base
    return _DEFAULT_COMPOSITOR.build(filters)
