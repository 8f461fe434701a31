"""Tests for drifted-series merging."""

from datetime import date

import pytest
from smartbudget_recurring.pipeline import can_merge, jaccard, merge_drifted_series

from tests.shared.dates import monthly_dates


class TestJaccard:
    def test_symmetric(self) -> None:
        a = {"nissan", "auto", "loan"}
        b = {"nissan", "loan", "retail"}
        assert jaccard(a, b) == jaccard(b, a) == 0.5

    def test_identical(self) -> None:
        assert jaccard({"nissan"}, {"nissan"}) == 1.0

    def test_both_empty(self) -> None:
        assert jaccard(set(), set()) == 1.0

    def test_one_empty(self) -> None:
        assert jaccard({"nissan"}, set()) == 0.0


class TestCanMerge:
    def test_drifted_titles_merge(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000)
        b = make_candidate("NISSAN AUTO LOAN RETAIL", monthly_dates(date(2024, 5, 15), 4), -35_200)
        assert can_merge(a, b)
        assert can_merge(b, a)

    def test_rejects_opposite_direction(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000)
        b = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 5, 15), 4), 35_000)
        assert not can_merge(a, b)

    def test_rejects_non_monthly(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000)
        b = make_candidate(
            "NISSAN AUTO LOAN RETAIL",
            [date(2024, 5, 15), date(2024, 7, 15), date(2024, 9, 15), date(2024, 11, 15)],
            -35_000,
        )
        assert not can_merge(a, b)

    def test_rejects_different_amounts(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000)
        b = make_candidate("NISSAN AUTO LOAN RETAIL", monthly_dates(date(2024, 5, 15), 4), -40_000)
        assert not can_merge(a, b)

    def test_accepts_small_absolute_difference(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -1_000)
        b = make_candidate("NISSAN AUTO LOAN RETAIL", monthly_dates(date(2024, 5, 15), 4), -1_450)
        assert can_merge(a, b)

    def test_rejects_distant_days(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 8), 4), -35_000)
        b = make_candidate("NISSAN AUTO LOAN RETAIL", monthly_dates(date(2024, 5, 20), 4), -35_000)
        assert not can_merge(a, b)

    def test_rejects_unrelated_titles(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000)
        b = make_candidate("STATE FARM INSURANCE", monthly_dates(date(2024, 5, 15), 4), -35_000)
        assert not can_merge(a, b)

    def test_single_item_never_merges(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000)
        b = make_candidate("NISSAN AUTO LOAN", [date(2024, 5, 15)], -35_000)
        assert not can_merge(a, b)


class TestMergeDriftedSeries:
    def test_collapses_into_longer_keys(self, make_candidate) -> None:
        a = make_candidate(
            "NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000, confidence=0.9
        )
        b = make_candidate(
            "NISSAN AUTO LOAN RETAIL",
            monthly_dates(date(2024, 5, 15), 4),
            -35_000,
            confidence=0.95,
        )

        merged = merge_drifted_series([b, a])

        assert len(merged) == 1
        result = merged[0]
        assert result.count == 8
        assert result.merchant_key == "nissan retail loan"
        assert result.series_key == "nissan retail loan"
        assert result.display_name == "NISSAN AUTO LOAN RETAIL"
        assert result.confidence == 0.95
        assert result.dates == sorted(result.dates)

    def test_keeps_unrelated_series(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 6), -35_000)
        b = make_candidate("NETFLIX", monthly_dates(date(2024, 1, 3), 6), -1_599)

        merged = merge_drifted_series([a, b])

        assert [c.series_key for c in merged] == ["netflix", "nissan loan | auto"]

    def test_chained_merges(self, make_candidate) -> None:
        a = make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000)
        b = make_candidate("NISSAN AUTO LOAN RETAIL", monthly_dates(date(2024, 5, 15), 4), -35_000)
        c = make_candidate("NISSAN AUTO LOAN RETAIL SVC", monthly_dates(date(2024, 9, 15), 4), -35_000)

        merged = merge_drifted_series([a, b, c])

        assert len(merged) == 1
        assert merged[0].count == 12

    def test_idempotent(self, make_candidate) -> None:
        candidates = [
            make_candidate("NISSAN AUTO LOAN", monthly_dates(date(2024, 1, 15), 4), -35_000),
            make_candidate("NISSAN AUTO LOAN RETAIL", monthly_dates(date(2024, 5, 15), 4), -35_000),
            make_candidate("NETFLIX", monthly_dates(date(2024, 1, 3), 8), -1_599),
            make_candidate("CITY WATER", monthly_dates(date(2024, 1, 28), 8), -6_000),
        ]

        once = merge_drifted_series(candidates)
        twice = merge_drifted_series(once)

        assert twice == once

    @pytest.mark.parametrize("n", [0, 1])
    def test_trivial_inputs(self, make_candidate, n: int) -> None:
        candidates = [
            make_candidate("NETFLIX", monthly_dates(date(2024, 1, 3), 6), -1_599)
        ][:n]
        assert merge_drifted_series(candidates) == candidates
