"""Tests for day-gap analysis."""

from datetime import date

import pytest
from smartbudget_recurring.scoring import (
    compute_day_gaps,
    gap_window_score,
    is_payment_like,
    monthly_gap_score,
)

from tests.shared.dates import monthly_dates


class TestComputeDayGaps:
    def test_consecutive_differences(self) -> None:
        dates = [date(2024, 1, 1), date(2024, 2, 1), date(2024, 3, 1)]
        assert compute_day_gaps(dates) == [31, 29]

    def test_single_date_has_no_gaps(self) -> None:
        assert compute_day_gaps([date(2024, 1, 1)]) == []

    def test_empty(self) -> None:
        assert compute_day_gaps([]) == []

    def test_same_day_gap_is_zero(self) -> None:
        assert compute_day_gaps([date(2024, 1, 1), date(2024, 1, 1)]) == [0]


class TestGapWindowScore:
    def test_fraction_inside_window(self) -> None:
        assert gap_window_score([30, 31, 60, 29], 28, 35) == 0.75

    def test_bounds_inclusive(self) -> None:
        assert gap_window_score([28, 35], 28, 35) == 1.0

    def test_no_gaps(self) -> None:
        assert gap_window_score([], 28, 35) == 0.0


class TestMonthlyGapScore:
    def test_calendar_months(self) -> None:
        assert monthly_gap_score(monthly_dates(date(2024, 1, 15), 6)) == 1.0

    def test_sorts_dates(self) -> None:
        dates = list(reversed(monthly_dates(date(2024, 1, 15), 4)))
        assert monthly_gap_score(dates) == 1.0

    def test_ignores_payment_widening(self) -> None:
        dates = [date(2024, 1, 1), date(2024, 2, 8), date(2024, 3, 8)]
        # 38 days falls outside 28-35
        assert monthly_gap_score(dates) == 0.5


class TestIsPaymentLike:
    def test_token_marker(self) -> None:
        assert is_payment_like([frozenset({"amex", "epayment"})], ["AMEX EPAYMENT"])

    @pytest.mark.parametrize(
        "title",
        ["CITY PHX WATER PAYMENT", "GEICO ACH", "chase card pmt", "AMEX EPAYMENT"],
    )
    def test_title_marker(self, title: str) -> None:
        assert is_payment_like([frozenset()], [title])

    def test_plain_subscription(self) -> None:
        assert not is_payment_like([frozenset({"netflix"})], ["NETFLIX.COM"])

    def test_pymt_is_not_a_title_marker(self) -> None:
        assert not is_payment_like([frozenset({"home", "depot"})], ["HOME DEPOT AUTO PYMT"])

    def test_substring_check_matches_inside_words(self) -> None:
        assert is_payment_like([frozenset({"coach"})], ["COACH OUTLET"])
