"""Clock sources for time expression evaluation.

Every operation that needs "now" reads it through a ``Clock`` rather than
calling ``time.time()`` directly. Production callers pass ``SystemClock``;
tests pass a ``FrozenClock`` so relative expressions resolve exactly.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current time as epoch seconds."""

    def now(self) -> float:
        ...


class SystemClock:
    """Clock backed by the real system time."""

    def now(self) -> float:
        return time.time()

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FrozenClock:
    """Clock pinned to a fixed instant.

    Args:
        at: Epoch seconds returned by every call to ``now()``
    """

    at: float

    def now(self) -> float:
        return self.at

    def advance(self, seconds: float) -> "FrozenClock":
        """Return a new clock moved forward by ``seconds``."""
        return FrozenClock(self.at + seconds)


DEFAULT_CLOCK = SystemClock()


def resolve_clock(clock: Optional[Clock]) -> Clock:
    return clock if clock is not None else DEFAULT_CLOCK


def now_seconds(clock: Optional[Clock] = None) -> int:
    """Current time as whole epoch seconds (fractions floored)."""
    return math.floor(resolve_clock(clock).now())


def hours_ago(hours: float, clock: Optional[Clock] = None) -> int:
    return math.floor(now_seconds(clock) - hours * SECONDS_PER_HOUR)


def days_ago(days: float, clock: Optional[Clock] = None) -> int:
    return math.floor(now_seconds(clock) - days * SECONDS_PER_DAY)
