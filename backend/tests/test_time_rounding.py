"""
Unit tests for the clock-punch rounding rules.
"""
from datetime import datetime, timezone

import pytest

from paycycle.utils.time_rounding import round_time


@pytest.mark.parametrize(
    "minute, second, expected",
    [
        (0, 0, datetime(2024, 3, 4, 9, 0)),
        (5, 0, datetime(2024, 3, 4, 9, 0)),
        (12, 0, datetime(2024, 3, 4, 9, 15)),
        (20, 0, datetime(2024, 3, 4, 9, 30)),
        (40, 0, datetime(2024, 3, 4, 9, 30)),
        (50, 0, datetime(2024, 3, 4, 10, 0)),
    ],
)
def test_boundary_table(minute, second, expected):
    assert round_time(datetime(2024, 3, 4, 9, minute, second)) == expected


@pytest.mark.parametrize(
    "minute, expected_hour, expected_minute",
    [
        (1, 9, 0),
        (9, 9, 0),
        (10, 9, 15),
        (15, 9, 15),
        (16, 9, 30),
        (30, 9, 30),
        (31, 9, 30),
        (44, 9, 30),
        (45, 10, 0),
        (59, 10, 0),
    ],
)
def test_bucket_edges(minute, expected_hour, expected_minute):
    rounded = round_time(datetime(2024, 3, 4, 9, minute))
    assert (rounded.hour, rounded.minute) == (expected_hour, expected_minute)


def test_seconds_and_microseconds_truncated():
    assert round_time(datetime(2024, 3, 4, 9, 0, 45, 123456)) == datetime(2024, 3, 4, 9, 0)
    assert round_time(datetime(2024, 3, 4, 9, 12, 59)) == datetime(2024, 3, 4, 9, 15)


def test_next_hour_rolls_over_midnight_and_year():
    assert round_time(datetime(2024, 12, 31, 23, 50)) == datetime(2025, 1, 1, 0, 0)


def test_timezone_is_preserved():
    ts = datetime(2024, 3, 4, 14, 12, tzinfo=timezone.utc)
    rounded = round_time(ts)
    assert rounded.tzinfo is timezone.utc
    assert rounded == datetime(2024, 3, 4, 14, 15, tzinfo=timezone.utc)


def test_idempotent_for_every_minute():
    for minute in range(60):
        for second in (0, 1, 30, 59):
            once = round_time(datetime(2024, 3, 4, 9, minute, second))
            assert round_time(once) == once


def test_result_always_on_quarter_hour():
    for minute in range(60):
        assert round_time(datetime(2024, 3, 4, 9, minute)).minute in (0, 15, 30)
