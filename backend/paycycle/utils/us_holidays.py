"""
US federal holidays (fixed list, no observed-day shifting).
"""
from datetime import date

import holidays

from paycycle.schemas.pay_period import PayPeriod

# library name → name shown on timesheets and in the iCal feed
_DISPLAY_NAMES = {
    "Martin Luther King Jr. Day": "Martin Luther King, Jr.'s Birthday",
    "Washington's Birthday": "Washington's Birthday (Presidents' Day)",
    "Thanksgiving": "Thanksgiving Day",
}


def get_us_holidays(year: int) -> dict[date, str]:
    """Returns all federal holidays of a year, in date order."""
    cal = holidays.US(years=year, observed=False)
    return {d: _DISPLAY_NAMES.get(name, name) for d, name in sorted(cal.items())}


def is_holiday(d: date) -> tuple[bool, str | None]:
    name = get_us_holidays(d.year).get(d)
    return name is not None, name


def holidays_between(start: date, end: date) -> dict[date, str]:
    """All holidays in the inclusive range [start, end]."""
    result: dict[date, str] = {}
    for year in range(start.year, end.year + 1):
        for d, name in get_us_holidays(year).items():
            if start <= d <= end:
                result[d] = name
    return result


def holidays_in_period(period: PayPeriod) -> dict[date, str]:
    return holidays_between(period.start, period.end)
