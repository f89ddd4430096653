from __future__ import annotations

from datetime import date

import pytest

from src.tutoring_center.tutoring_center.common.datetime_utils import add_years, parse_weekday, weekday_token


@pytest.mark.parametrize(
    "token,expected",
    [("Mon", 0), ("tue", 1), (" WEDNESDAY ", 2), ("thursday", 3), ("Sun", 6)],
)
def test_parse_weekday_accepts_short_and_full_names(token, expected):
    assert parse_weekday(token) == expected


@pytest.mark.parametrize("token", ["Monkey", "Sunrise", "Satur", "Mo", "", None])
def test_parse_weekday_rejects_words_that_only_start_like_a_day(token):
    assert parse_weekday(token) is None


def test_weekday_token_round_trips_through_parse():
    assert [parse_weekday(weekday_token(i)) for i in range(7)] == list(range(7))


def test_add_years_clamps_leap_day():
    assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)
    assert add_years(date(2024, 3, 1), 3) == date(2027, 3, 1)
