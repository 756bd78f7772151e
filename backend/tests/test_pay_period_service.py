"""
Tests for PayPeriodResolver – containment, contiguity, pay dates, the
year-boundary convention and YYYY-MM-DD round trips. Pure functions, no app.
"""
from datetime import date, datetime, timedelta

import pytest

from paycycle.core.exceptions import InvalidInput
from paycycle.schemas.pay_period import DateRange, PayPeriod
from paycycle.schemas.payroll import Payroll
from paycycle.services.pay_period_service import (
    PayPeriodResolver,
    find_overlap,
    format_date,
    get_resolver,
    parse_date,
    week_start,
)

SUNDAY = 6
THURSDAY = 3


def _every_day(start: date, end: date):
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


# ── period_containing ─────────────────────────────────────────────────────────

def test_reference_period(resolver):
    """The reference Sunday starts a period ending Saturday, paid the Thursday after."""
    period = resolver.period_containing(date(2024, 1, 7))
    assert period == PayPeriod(start=date(2024, 1, 7), end=date(2024, 1, 20), pay_date=date(2024, 1, 25))


def test_last_day_of_period_stays_in_period(resolver):
    assert resolver.period_containing(date(2024, 1, 20)).start == date(2024, 1, 7)


def test_day_after_period_starts_next(resolver):
    period = resolver.period_containing(date(2024, 1, 21))
    assert period.start == date(2024, 1, 21)
    assert period.end == date(2024, 2, 3)
    assert period.pay_date == date(2024, 2, 8)


def test_date_before_reference_uses_floor_division(resolver):
    """Dec 31 2023 is one week before the reference: cycle -1, not cycle 0."""
    period = resolver.period_containing(date(2023, 12, 31))
    assert period.start == date(2023, 12, 24)
    assert period.end == date(2024, 1, 6)
    assert period.pay_date == date(2024, 1, 11)


def test_far_past_date_is_aligned_to_reference(resolver):
    period = resolver.period_containing(date(2020, 3, 15))
    assert period.contains(date(2020, 3, 15))
    assert (resolver.reference_start - period.start).days % 14 == 0


def test_datetime_input_uses_date_part(resolver):
    period = resolver.period_containing(datetime(2024, 1, 20, 23, 59))
    assert period.start == date(2024, 1, 7)


def test_containment_and_shape_for_every_day(resolver):
    for d in _every_day(date(2022, 12, 1), date(2026, 2, 1)):
        period = resolver.period_containing(d)
        assert period.start <= d <= period.end
        assert period.start.weekday() == SUNDAY
        assert period.end - period.start == timedelta(days=13)


def test_pay_date_is_thursday_within_six_days_of_end(resolver):
    for d in _every_day(date(2023, 1, 1), date(2025, 12, 31)):
        period = resolver.period_containing(d)
        assert period.pay_date > period.end
        assert (period.pay_date - period.end).days <= 6
        assert period.pay_date.weekday() == THURSDAY


def test_default_resolver_uses_configured_anchor():
    """The configured anchor Sunday 2025-08-24 starts a period paid Thu 2025-09-11."""
    period = get_resolver().period_containing(date(2025, 8, 24))
    assert period.start == date(2025, 8, 24)
    assert period.end == date(2025, 9, 6)
    assert period.pay_date == date(2025, 9, 11)


# ── yearly_periods ────────────────────────────────────────────────────────────

def test_yearly_periods_2024(resolver):
    periods = resolver.yearly_periods(2024)
    assert len(periods) == 26
    assert periods[0].start == date(2024, 1, 7)
    assert periods[-1].start == date(2024, 12, 22)


def test_yearly_periods_include_period_spilling_into_next_year(resolver):
    """A period belongs to the year it starts in, even if it ends and is paid in January."""
    last = resolver.yearly_periods(2024)[-1]
    assert last.end == date(2025, 1, 4)
    assert last.pay_date == date(2025, 1, 9)
    assert resolver.yearly_periods(2025)[0].start == date(2025, 1, 5)


def test_yearly_periods_exclude_period_started_in_prior_year(resolver):
    """Dec 24 2023 – Jan 6 2024 covers New Year's Day but belongs to 2023."""
    assert all(p.start.year == 2024 for p in resolver.yearly_periods(2024))
    assert resolver.yearly_periods(2023)[-1].start == date(2023, 12, 24)


@pytest.mark.parametrize("year", [2019, 2023, 2024, 2025, 2026, 2030])
def test_yearly_periods_are_contiguous(resolver, year):
    periods = resolver.yearly_periods(year)
    assert len(periods) in (26, 27)
    for prev, nxt in zip(periods, periods[1:]):
        assert nxt.start == prev.end + timedelta(days=1)


def test_yearly_periods_restartable(resolver):
    assert resolver.yearly_periods(2025) == resolver.yearly_periods(2025)


# ── pay dates & navigation ────────────────────────────────────────────────────

def test_pay_date_for_period_start(resolver):
    assert resolver.pay_date_for(date(2024, 1, 7)) == date(2024, 1, 25)


def test_pay_date_for_matches_period_containing(resolver):
    for period in resolver.yearly_periods(2025):
        assert resolver.pay_date_for(period.start) == period.pay_date


def test_next_period_after_last_run(resolver):
    assert resolver.next_period_after(date(2024, 1, 20)).start == date(2024, 1, 21)
    assert resolver.next_period_after(date(2024, 1, 10)).start == date(2024, 1, 21)


def test_next_period_after_crosses_year(resolver):
    assert resolver.next_period_after(date(2024, 12, 31)).start == date(2025, 1, 5)


def test_previous_and_next_are_inverse(resolver):
    period = resolver.period_containing(date(2024, 6, 1))
    assert resolver.previous_period(resolver.next_period(period)) == period


def test_current_pay_period_before_pay_date(resolver):
    """Tue Jan 23: period Jan 7–20 is still unpaid (pay date Jan 25)."""
    assert resolver.current_pay_period(date(2024, 1, 23)).start == date(2024, 1, 7)


def test_current_pay_period_on_pay_date(resolver):
    assert resolver.current_pay_period(date(2024, 1, 25)).start == date(2024, 1, 7)


def test_current_pay_period_after_pay_date(resolver):
    assert resolver.current_pay_period(date(2024, 1, 26)).start == date(2024, 1, 21)


def test_periods_between(resolver):
    periods = resolver.periods_between(date(2024, 1, 1), date(2024, 1, 31))
    assert [p.start for p in periods] == [date(2023, 12, 24), date(2024, 1, 7), date(2024, 1, 21)]


def test_periods_between_rejects_reversed_range(resolver):
    with pytest.raises(InvalidInput):
        resolver.periods_between(date(2024, 2, 1), date(2024, 1, 1))


# ── find_overlap ──────────────────────────────────────────────────────────────

def test_find_overlap_detects_shared_day():
    existing = [DateRange(from_date=date(2024, 1, 7), to_date=date(2024, 1, 20))]
    overlap = find_overlap(date(2024, 1, 20), date(2024, 2, 2), existing)
    assert overlap == existing[0]


def test_find_overlap_adjacent_range_is_free():
    existing = [DateRange(from_date=date(2024, 1, 7), to_date=date(2024, 1, 20))]
    assert find_overlap(date(2024, 1, 21), date(2024, 2, 3), existing) is None


# ── configuration checks ──────────────────────────────────────────────────────

def test_reference_must_be_sunday():
    with pytest.raises(InvalidInput) as exc:
        PayPeriodResolver(reference_start=date(2024, 1, 8))
    assert exc.value.field == "PAY_PERIOD_REFERENCE_START"


def test_period_length_must_be_whole_weeks():
    with pytest.raises(InvalidInput):
        PayPeriodResolver(reference_start=date(2024, 1, 7), period_days=10)


def test_week_start_is_sunday_on_or_before():
    assert week_start(date(2024, 1, 7)) == date(2024, 1, 7)
    assert week_start(date(2024, 1, 13)) == date(2024, 1, 7)
    assert week_start(date(2024, 1, 8)) == date(2024, 1, 7)


# ── YYYY-MM-DD round trip ─────────────────────────────────────────────────────

def test_format_parse_round_trip(resolver):
    for period in resolver.yearly_periods(2024) + resolver.yearly_periods(2025):
        for d in (period.start, period.end, period.pay_date):
            text = format_date(d)
            assert len(text) == 10
            assert parse_date(text) == d


def test_parse_date_rejects_other_formats():
    with pytest.raises(InvalidInput) as exc:
        parse_date("01/07/2024", field="fromDate")
    assert exc.value.field == "fromDate"


def test_payroll_snapshot_dates_round_trip(resolver):
    period = resolver.period_containing(date(2024, 12, 25))
    snapshot = Payroll(from_date=period.start, to_date=period.end, pay_date=period.pay_date)

    raw = snapshot.model_dump(mode="json", by_alias=True)
    assert raw["fromDate"] == "2024-12-22"
    assert raw["toDate"] == "2025-01-04"
    assert raw["payDate"] == "2025-01-09"

    restored = Payroll.model_validate_json(snapshot.model_dump_json(by_alias=True))
    assert (restored.from_date, restored.to_date, restored.pay_date) == (period.start, period.end, period.pay_date)
