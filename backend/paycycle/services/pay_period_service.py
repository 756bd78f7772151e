"""
PayPeriodResolver: bi-weekly pay periods and their pay dates.

Periods are anchored to a known Sunday. A period runs Sunday through the
Saturday 13 days later and is paid on the first Thursday after it ends.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Iterable

from paycycle.core.config import settings
from paycycle.core.exceptions import AmbiguousPeriod, InvalidInput
from paycycle.schemas.pay_period import DateRange, PayPeriod

logger = logging.getLogger(__name__)

SUNDAY = 6
DATE_FORMAT = "%Y-%m-%d"


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def week_start(day: date) -> date:
    """The Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def parse_date(value: str, field: str = "date") -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidInput(f"{field} must be YYYY-MM-DD, got {value!r}", field=field)


class PayPeriodResolver:

    def __init__(
        self,
        reference_start: date | None = None,
        period_days: int | None = None,
        pay_weekday: int | None = None,
    ):
        self.reference_start = reference_start or settings.PAY_PERIOD_REFERENCE_START
        self.period_days = period_days or settings.PAY_PERIOD_DAYS
        self.pay_weekday = settings.PAY_DATE_WEEKDAY if pay_weekday is None else pay_weekday

        if self.reference_start.weekday() != SUNDAY:
            raise InvalidInput(
                f"reference start {self.reference_start} is not a Sunday",
                field="PAY_PERIOD_REFERENCE_START",
            )
        if self.period_days <= 0 or self.period_days % 7:
            raise InvalidInput(
                f"period length must be a whole number of weeks, got {self.period_days}",
                field="PAY_PERIOD_DAYS",
            )
        if not 0 <= self.pay_weekday <= 6:
            raise InvalidInput(
                f"pay weekday must be 0..6, got {self.pay_weekday}",
                field="PAY_DATE_WEEKDAY",
            )

    def pay_date_after(self, end: date) -> date:
        """First pay weekday strictly after ``end``."""
        offset = (self.pay_weekday - end.weekday()) % 7 or 7
        return end + timedelta(days=offset)

    def _build(self, start: date) -> PayPeriod:
        end = start + timedelta(days=self.period_days - 1)
        return PayPeriod(start=start, end=end, pay_date=self.pay_date_after(end))

    def period_containing(self, day: date | datetime) -> PayPeriod:
        day = _as_date(day)
        # Floor division: dates before the reference get negative cycles
        cycle = (week_start(day) - self.reference_start).days // self.period_days
        period = self._build(self.reference_start + timedelta(days=cycle * self.period_days))

        if not period.contains(day):
            raise AmbiguousPeriod(f"{day} did not resolve to a pay period (got {period.label})", field="day")
        return period

    def pay_date_for(self, period_start: date | datetime) -> date:
        return self.period_containing(period_start).pay_date

    def next_period(self, period: PayPeriod) -> PayPeriod:
        return self.period_containing(period.end + timedelta(days=1))

    def previous_period(self, period: PayPeriod) -> PayPeriod:
        return self.period_containing(period.start - timedelta(days=1))

    def yearly_periods(self, year: int) -> list[PayPeriod]:
        """
        All periods whose start lies in [Jan 1 of year, Jan 1 of year+1).
        A period belongs to the year it starts in, even when its end or pay
        date falls in January of the following year.
        """
        period = self.period_containing(date(year, 1, 1))
        if period.start.year < year:
            period = self.next_period(period)

        periods: list[PayPeriod] = []
        while period.start.year == year:
            periods.append(period)
            period = self.next_period(period)
        return periods

    def next_period_after(self, last_to_date: date) -> PayPeriod:
        """The first period starting after ``last_to_date`` (the next payroll run)."""
        return self.next_period(self.period_containing(last_to_date))

    def current_pay_period(self, today: date | datetime) -> PayPeriod:
        """The earliest period not yet paid as of ``today``."""
        today = _as_date(today)
        period = self.period_containing(today)
        previous = self.previous_period(period)
        return previous if previous.pay_date >= today else period

    def periods_between(self, start: date, end: date) -> list[PayPeriod]:
        """Periods overlapping the inclusive range [start, end]."""
        if start > end:
            raise InvalidInput(f"range start {start} is after end {end}", field="start")
        periods = []
        period = self.period_containing(start)
        while period.start <= end:
            periods.append(period)
            period = self.next_period(period)
        return periods


def find_overlap(
    candidate_start: date,
    candidate_end: date,
    existing: Iterable[DateRange],
) -> DateRange | None:
    """First existing payroll range sharing at least one day with the candidate."""
    for rng in existing:
        if candidate_start <= rng.to_date and rng.from_date <= candidate_end:
            logger.debug("Range %s–%s overlaps %s–%s", candidate_start, candidate_end, rng.from_date, rng.to_date)
            return rng
    return None


def get_resolver() -> PayPeriodResolver:
    """Resolver built from the current settings."""
    return PayPeriodResolver()


def period_containing(day: date | datetime) -> PayPeriod:
    return get_resolver().period_containing(day)


def yearly_periods(year: int) -> list[PayPeriod]:
    return get_resolver().yearly_periods(year)


def pay_date_for(period_start: date | datetime) -> date:
    return get_resolver().pay_date_for(period_start)
