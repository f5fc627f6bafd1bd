"""Unit tests for the sampler and its strategies."""

from types import SimpleNamespace

import pytest

from logsift.sampling.sampler import (
    SampleMode,
    Sampler,
    diverse_sample,
    plan_fetch_limit,
    select_samples,
    spread_sample,
)


@pytest.fixture
def sampler():
    return Sampler()


class TestFirstMode:
    def test_truncates_in_order(self, sampler, numbered_records):
        result = sampler.select(numbered_records, 3, "first")

        assert [r["id"] for r in result.samples] == ["0", "1", "2"]
        assert result.mode is SampleMode.FIRST
        assert result.distinct_patterns is None

    def test_limit_above_size(self, sampler, numbered_records):
        assert sampler.select(numbered_records, 50, "first").count == 10

    def test_unknown_mode_acts_as_first(self, sampler, numbered_records):
        result = sampler.select(numbered_records, 2, "random")
        assert result.mode is SampleMode.FIRST
        assert [r["id"] for r in result.samples] == ["0", "1"]

    def test_negative_limit_is_empty(self, sampler, numbered_records):
        assert sampler.select(numbered_records, -2, "first").samples == []


class TestSpreadMode:
    def test_evenly_spaced_indices(self, sampler, numbered_records):
        result = sampler.select(numbered_records, 3, SampleMode.SPREAD)
        assert [r["id"] for r in result.samples] == ["0", "3", "6"]

    def test_small_input_unchanged(self, sampler, numbered_records):
        result = sampler.select(numbered_records[:4], 4, "spread")
        assert result.samples == numbered_records[:4]

    @pytest.mark.parametrize("size", [2, 7, 10, 99, 100, 1000])
    @pytest.mark.parametrize("limit", [1, 2, 3, 25])
    def test_exact_count_and_first_record(self, size, limit):
        items = list(range(size))
        if size <= limit:
            assert spread_sample(items, limit) == items
            return

        picked = spread_sample(items, limit)
        assert len(picked) == limit
        assert picked[0] == 0
        assert picked == sorted(set(picked))

    def test_last_record_not_guaranteed(self):
        assert spread_sample(list(range(10)), 3)[-1] != 9

    def test_zero_limit(self):
        assert spread_sample([1, 2, 3], 0) == []


class TestDiverseMode:
    def test_capped_at_limit(self, sampler, five_pattern_records):
        result = sampler.select(five_pattern_records, 3, "diverse")

        assert result.count == 3
        assert result.distinct_patterns == 3
        assert result.fetched == 100
        assert [r.timestamp for r in result.samples] == ["0", "1", "2"]

    def test_all_patterns_when_limit_allows(self, sampler, five_pattern_records):
        result = sampler.select(five_pattern_records, 25, "diverse")

        assert result.distinct_patterns == 5
        assert [r.timestamp for r in result.samples] == ["0", "1", "2", "3", "4"]

    def test_attribute_and_mapping_records(self):
        records = [
            {"message": "disk 1.2.3.4 full"},
            SimpleNamespace(message="disk 5.6.7.8 full"),
            {"message": "cpu hot"},
            {"no_message": True},
        ]
        picked = diverse_sample(records, 10)
        assert picked == [records[0], records[2], records[3]]

    def test_zero_limit(self, five_pattern_records):
        assert diverse_sample(five_pattern_records, 0) == []


class TestSampleResult:
    def test_meta_for_diverse(self, five_pattern_records):
        result = select_samples(five_pattern_records, 2, "diverse")
        assert result.to_meta() == {
            "count": 2,
            "sample": "diverse",
            "fetched": 100,
            "distinctPatterns": 2,
        }

    def test_meta_for_first(self, numbered_records):
        assert select_samples(numbered_records, 1).to_meta() == {"count": 1, "sample": "first"}


class TestPlanFetchLimit:
    def test_first_fetches_requested(self):
        assert plan_fetch_limit(25, "first", 100) == 25

    def test_sampling_modes_over_fetch(self):
        assert plan_fetch_limit(10, "spread", 100) == 40
        assert plan_fetch_limit(10, SampleMode.DIVERSE, 100, multiplier=3) == 30

    def test_capped_by_max(self):
        assert plan_fetch_limit(50, "diverse", 100) == 100

    def test_coerce(self):
        assert SampleMode.coerce(" Spread ") is SampleMode.SPREAD
        assert SampleMode.coerce(None) is SampleMode.FIRST
