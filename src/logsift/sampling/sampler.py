"""Bounded sampling of fetched log records.

Three strategies reduce an already-fetched result set to at most ``limit``
records:

- ``first``: chronological truncation, order preserved
- ``spread``: evenly spaced indices across the whole set
- ``diverse``: first record of each distinct message pattern

The sampler never fetches. Callers that want spread or diverse coverage
over more than ``limit`` records must over-fetch first; see
``plan_fetch_limit``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar, Union

from logsift.sampling.patterns import PatternNormalizer

T = TypeVar("T")

DEFAULT_FETCH_MULTIPLIER = 4


class SampleMode(str, Enum):
    """Sampling strategy."""

    FIRST = "first"
    SPREAD = "spread"
    DIVERSE = "diverse"

    @classmethod
    def coerce(cls, value: Union["SampleMode", str, None]) -> "SampleMode":
        """Resolve a mode name; absent or unknown names mean FIRST."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.FIRST
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.FIRST


@dataclass(frozen=True)
class LogRecord:
    """Minimal record shape accepted by the sampler."""

    message: str
    timestamp: Optional[str] = None
    service: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class SampleResult:
    """Selected records plus sampling metadata."""

    samples: List[Any]
    mode: SampleMode
    fetched: int
    distinct_patterns: Optional[int] = None

    @property
    def count(self) -> int:
        return len(self.samples)

    def to_meta(self) -> Dict[str, Any]:
        """Metadata in the shape result formatters report."""
        meta: Dict[str, Any] = {"count": self.count, "sample": self.mode.value}
        if self.mode is not SampleMode.FIRST:
            meta["fetched"] = self.fetched
        if self.distinct_patterns is not None:
            meta["distinctPatterns"] = self.distinct_patterns
        return meta


def message_of(record: Any) -> str:
    """Read a record's message from a mapping key or an attribute."""
    if isinstance(record, Mapping):
        message = record.get("message")
    else:
        message = getattr(record, "message", None)
    return message if isinstance(message, str) else ""


def spread_sample(items: Sequence[T], limit: int) -> List[T]:
    """Pick ``limit`` evenly spaced items; always includes the first."""
    limit = max(limit, 0)
    if len(items) <= limit:
        return list(items)
    total = len(items)
    return [items[i * total // limit] for i in range(limit)]


def diverse_sample(
    items: Sequence[T],
    limit: int,
    normalizer: Optional[PatternNormalizer] = None,
) -> List[T]:
    """Keep the earliest item of each message pattern, up to ``limit`` patterns."""
    if limit <= 0:
        return []

    normalizer = normalizer or PatternNormalizer()
    seen: Dict[str, T] = {}

    for item in items:
        pattern = normalizer.normalize(message_of(item))
        if pattern not in seen:
            seen[pattern] = item
            if len(seen) >= limit:
                break

    return list(seen.values())


class Sampler:
    """Select a bounded, representative subset of records."""

    def __init__(self, normalizer: Optional[PatternNormalizer] = None):
        self.normalizer = normalizer or PatternNormalizer()

    def select(
        self,
        records: Sequence[Any],
        limit: int,
        mode: Union[SampleMode, str, None] = SampleMode.FIRST,
    ) -> SampleResult:
        """Sample ``records`` down to at most ``limit`` items.

        Args:
            records: Already-fetched records exposing a ``message``
            limit: Maximum number of records to return (negative means 0)
            mode: "first", "spread" or "diverse"; unknown modes act as "first"

        Returns:
            SampleResult; ``distinct_patterns`` is only set for diverse mode
        """
        sample_mode = SampleMode.coerce(mode)
        limit = max(limit, 0)

        if sample_mode is SampleMode.SPREAD:
            samples = spread_sample(records, limit)
            return SampleResult(samples, sample_mode, len(records))

        if sample_mode is SampleMode.DIVERSE:
            samples = diverse_sample(records, limit, self.normalizer)
            return SampleResult(samples, sample_mode, len(records), len(samples))

        return SampleResult(list(records[:limit]), sample_mode, len(records))


def plan_fetch_limit(
    requested_limit: int,
    mode: Union[SampleMode, str, None],
    max_records: int,
    multiplier: int = DEFAULT_FETCH_MULTIPLIER,
) -> int:
    """How many records to fetch so the chosen mode has room to sample.

    "first" needs exactly ``requested_limit``; spread and diverse fetch
    ``multiplier`` times more. The result never exceeds ``max_records``.
    """
    factor = 1 if SampleMode.coerce(mode) is SampleMode.FIRST else multiplier
    return max(min(requested_limit * factor, max_records), 0)


def select_samples(
    records: Sequence[Any],
    limit: int,
    mode: Union[SampleMode, str, None] = SampleMode.FIRST,
) -> SampleResult:
    """Convenience wrapper around ``Sampler.select``."""
    return Sampler().select(records, limit, mode)
