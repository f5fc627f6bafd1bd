"""Unit tests for time range normalization and resolution."""

import logging

import pytest

from logsift.configuration.settings import LimitsSettings
from logsift.temporal.models import TimeRange
from logsift.temporal.ranges import TimeRangeResolver, ensure_valid_time_range


class TestEnsureValidTimeRange:
    """Any pair becomes start < end with the minimum span."""

    def test_valid_range_unchanged(self):
        assert ensure_valid_time_range(1000, 5000) == (1000, 5000)

    def test_reversed_range_is_swapped(self):
        assert ensure_valid_time_range(5000, 1000) == (1000, 5000)

    def test_equal_bounds_are_widened(self):
        assert ensure_valid_time_range(1000, 1000) == (1000, 1060)

    def test_narrow_range_keeps_start(self):
        assert ensure_valid_time_range(1000, 1030) == (1000, 1060)

    def test_reversed_and_narrow(self):
        assert ensure_valid_time_range(1030, 1000) == (1000, 1060)

    def test_custom_min_span(self):
        assert ensure_valid_time_range(0, 10, min_span_seconds=300) == (0, 300)

    def test_zero_min_span_still_orders(self):
        start, end = ensure_valid_time_range(50, 50, min_span_seconds=0)
        assert start < end

    @pytest.mark.parametrize("start", [-86400, 0, 59, 1705320000])
    @pytest.mark.parametrize("delta", [-7200, -60, -1, 0, 1, 59, 60, 3600])
    def test_invariant_holds(self, start, delta):
        valid_start, valid_end = ensure_valid_time_range(start, start + delta)
        assert valid_start < valid_end
        assert valid_end - valid_start >= 60
        assert valid_start == min(start, start + delta)


class TestTimeRangeResolver:
    """Raw from/to expressions into a TimeRange."""

    def test_defaults_to_configured_window(self, frozen_clock, frozen_now):
        resolver = TimeRangeResolver(clock=frozen_clock)
        assert resolver.resolve() == TimeRange(frozen_now - 24 * 3600, frozen_now)

    def test_custom_window(self, frozen_clock, frozen_now):
        limits = LimitsSettings(default_time_range_hours=6)
        resolver = TimeRangeResolver(limits, frozen_clock)
        assert resolver.resolve().start == frozen_now - 6 * 3600

    def test_relative_from(self, frozen_clock, frozen_now):
        resolver = TimeRangeResolver(clock=frozen_clock)
        assert resolver.resolve("2h").as_tuple() == (frozen_now - 7200, frozen_now)

    def test_reversed_expressions_are_swapped(self, frozen_clock, frozen_now):
        resolver = TimeRangeResolver(clock=frozen_clock)
        assert resolver.resolve("1h", "2h").as_tuple() == (frozen_now - 7200, frozen_now - 3600)

    def test_identical_bounds_are_widened(self, frozen_clock):
        resolver = TimeRangeResolver(clock=frozen_clock)
        time_range = resolver.resolve("1700000000", 1700000000)
        assert time_range.as_tuple() == (1700000000, 1700000060)
        assert time_range.span_seconds == 60

    def test_min_span_from_settings(self, frozen_clock):
        resolver = TimeRangeResolver(LimitsSettings(min_span_seconds=600), frozen_clock)
        assert resolver.resolve(1000, 1000).as_tuple() == (1000, 1600)

    def test_fallback_is_logged(self, frozen_clock, frozen_now, caplog):
        caplog.set_level(logging.DEBUG, logger="logsift.temporal.ranges")
        resolver = TimeRangeResolver(clock=frozen_clock)

        time_range = resolver.resolve("whenever", "1h")

        assert time_range.as_tuple() == (frozen_now - 24 * 3600, frozen_now - 3600)
        assert "Unrecognized 'from' expression 'whenever'" in caplog.text


class TestTimeRange:
    def test_to_iso(self):
        assert TimeRange(1705320000, 1705323600).to_iso() == (
            "2024-01-15T12:00:00.000Z",
            "2024-01-15T13:00:00.000Z",
        )
