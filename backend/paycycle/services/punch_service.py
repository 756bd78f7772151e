"""
PunchAggregator: turns raw clock punches into daily and per-period totals.
"""
import logging
from datetime import date, datetime, timezone
from typing import Callable, Iterable
from zoneinfo import ZoneInfo

from paycycle.core.config import settings
from paycycle.schemas.pay_period import PayPeriod
from paycycle.schemas.punch import DailySummary, PeriodTimesheet, RawPunch
from paycycle.utils.time_rounding import round_time

logger = logging.getLogger(__name__)

Rounder = Callable[[datetime], datetime]

NO_PUNCH = "-"
MULTIPLE = "Multiple"
ACTIVE = "ACTIVE"


def _local(ts: datetime, tz: ZoneInfo) -> datetime:
    """Naive wall-clock time; naive input is already local."""
    if ts.tzinfo is None:
        return ts
    return ts.astimezone(tz).replace(tzinfo=None)


def _instant(wall: datetime, tz: ZoneInfo) -> datetime:
    """UTC instant of a local wall-clock time; `fold` picks the repeated hour."""
    return wall.replace(tzinfo=tz).astimezone(timezone.utc)


def punch_minutes(punch: RawPunch, rounder: Rounder | None = round_time, tz: ZoneInfo | None = None) -> int:
    """Whole minutes of a closed punch, never negative; open punches count 0."""
    if punch.time_out is None:
        return 0
    tz = tz or settings.tz
    time_in = _local(punch.time_in, tz)
    time_out = _local(punch.time_out, tz)
    if rounder is not None:
        time_in, time_out = rounder(time_in), rounder(time_out)
    # rounded on the wall clock, measured between instants
    elapsed = _instant(time_out, tz) - _instant(time_in, tz)
    return max(0, int(elapsed.total_seconds() // 60))


def summarize_day(
    punches: Iterable[RawPunch],
    day: date,
    employee_id: str | None = None,
    rounder: Rounder | None = round_time,
    tz: ZoneInfo | None = None,
) -> DailySummary:
    """
    Summarize the punches that clock in on ``day`` (local calendar day).

    Closed punches are rounded (both ends) and their clamped durations summed.
    Open punches add nothing but stay in the punch list so callers can show
    them as ACTIVE. When ``employee_id`` is given, other employees' punches
    are ignored.
    """
    tz = tz or settings.tz
    punches = list(punches)
    if employee_id is not None:
        punches = [p for p in punches if p.employee_id == employee_id]

    matching = sorted(
        (p for p in punches if _local(p.time_in, tz).date() == day),
        key=lambda p: _local(p.time_in, tz),
    )
    total = sum(punch_minutes(p, rounder, tz) for p in matching)

    if employee_id is None:
        employee_id = matching[0].employee_id if matching else (punches[0].employee_id if punches else "")

    return DailySummary(employee_id=employee_id, date=day, total_minutes=total, punches=matching)


def summarize_period(
    punches: Iterable[RawPunch],
    period: PayPeriod,
    employee_id: str,
    rounder: Rounder | None = round_time,
    tz: ZoneInfo | None = None,
) -> PeriodTimesheet:
    punches = [p for p in punches if p.employee_id == employee_id]
    days = [summarize_day(punches, d, employee_id, rounder, tz) for d in period.days()]
    sheet = PeriodTimesheet(employee_id=employee_id, period=period, days=days)
    logger.debug("Timesheet %s %s: %d min", employee_id, period.label, sheet.total_minutes)
    return sheet


def _clock(ts: datetime, tz: ZoneInfo) -> str:
    return _local(ts, tz).strftime("%I:%M %p")


def display_cells(summary: DailySummary, tz: ZoneInfo | None = None) -> tuple[str, str]:
    """(in, out) text for a timesheet cell: '-', 'Multiple', a time or 'ACTIVE'."""
    tz = tz or settings.tz
    if summary.punch_count == 0:
        return NO_PUNCH, NO_PUNCH
    if summary.punch_count > 1:
        return MULTIPLE, MULTIPLE
    punch = summary.punches[0]
    time_out = ACTIVE if punch.time_out is None else _clock(punch.time_out, tz)
    return _clock(punch.time_in, tz), time_out
