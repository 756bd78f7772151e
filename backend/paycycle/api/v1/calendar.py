"""
Calendar endpoints:

GET /api/v1/holidays/{year}                  – US federal holidays
GET /api/v1/calendar/pay-dates/{year}.ics    – iCal feed of pay dates and holidays
"""
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Path
from fastapi.responses import Response
from icalendar import Calendar, Event, vText

from paycycle.api.deps import Resolver
from paycycle.schemas.holiday import Holiday
from paycycle.schemas.pay_period import PayPeriod
from paycycle.utils.us_holidays import get_us_holidays, holidays_between

holidays_router = APIRouter(prefix="/holidays", tags=["calendar"])
router = APIRouter(prefix="/calendar", tags=["calendar"])


def _all_day(ev: Event, day) -> None:
    ev.add("dtstart", day)
    ev.add("dtend", day + timedelta(days=1))


def _build_calendar(periods: list[PayPeriod], holidays: dict, cal_name: str) -> bytes:
    cal = Calendar()
    cal.add("prodid", "-//Paycycle//Pay dates//EN")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", vText(cal_name))

    stamp = datetime.now(timezone.utc)
    for period in periods:
        ev = Event()
        ev.add("uid", f"paycycle-payday-{period.pay_date.isoformat()}@paycycle")
        ev.add("dtstamp", stamp)
        _all_day(ev, period.pay_date)
        ev.add("summary", vText("Pay day"))
        ev.add("description", vText(f"Pay period {period.label}"))
        cal.add_component(ev)

    for day, name in holidays.items():
        ev = Event()
        ev.add("uid", f"paycycle-holiday-{day.isoformat()}@paycycle")
        ev.add("dtstamp", stamp)
        _all_day(ev, day)
        ev.add("summary", vText(name))
        ev.add("transp", "TRANSPARENT")
        cal.add_component(ev)

    return cal.to_ical()


@holidays_router.get("/{year}", response_model=list[Holiday])
async def list_holidays(year: int = Path(ge=1, le=9999)):
    return [Holiday(date=d, name=name) for d, name in get_us_holidays(year).items()]


@router.get("/pay-dates/{year}.ics")
async def get_pay_date_feed(resolver: Resolver, year: int = Path(ge=2, le=9998)):
    """Pay days of every period starting in ``year``, plus the federal holidays they span."""
    periods = resolver.yearly_periods(year)
    holidays = holidays_between(periods[0].start, periods[-1].end) if periods else {}
    return Response(
        content=_build_calendar(periods, holidays, f"Pay dates {year}"),
        media_type="text/calendar; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="pay-dates-{year}.ics"',
            "Cache-Control": "no-cache",
        },
    )
