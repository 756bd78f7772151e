"""
Pay period API – bi-weekly periods and pay dates
"""
from datetime import date

from fastapi import APIRouter, Path
from pydantic import BaseModel

from paycycle.api.deps import Resolver, unprocessable
from paycycle.core.exceptions import PayrollError
from paycycle.schemas.base import CamelModel
from paycycle.schemas.pay_period import DateRange, PayPeriod
from paycycle.services.pay_period_service import find_overlap

router = APIRouter(prefix="/pay-periods", tags=["pay-periods"])


class PayDateOut(CamelModel):
    start: date
    pay_date: date


class OverlapRequest(CamelModel):
    candidate: DateRange
    existing: list[DateRange] = []


class OverlapOut(BaseModel):
    overlap: DateRange | None


@router.get("/containing", response_model=PayPeriod)
async def get_period_containing(day: date, resolver: Resolver):
    """The period whose 14 days include ``day``."""
    return resolver.period_containing(day)


@router.get("/current", response_model=PayPeriod)
async def get_current_period(resolver: Resolver, today: date | None = None):
    """The earliest period whose pay date has not passed yet."""
    return resolver.current_pay_period(today or date.today())


@router.get("/next", response_model=PayPeriod)
async def get_next_period(after: date, resolver: Resolver):
    """The period a new payroll run should cover, given the last run's end date."""
    return resolver.next_period_after(after)


@router.get("/pay-date", response_model=PayDateOut)
async def get_pay_date(start: date, resolver: Resolver):
    return PayDateOut(start=start, pay_date=resolver.pay_date_for(start))


@router.post("/check-overlap", response_model=OverlapOut)
async def check_overlap(payload: OverlapRequest):
    """Reports an existing payroll range that the candidate range would overlap."""
    candidate = payload.candidate
    if candidate.from_date > candidate.to_date:
        raise unprocessable(
            PayrollError(f"from date {candidate.from_date} is after to date {candidate.to_date}", field="fromDate")
        )
    return OverlapOut(overlap=find_overlap(candidate.from_date, candidate.to_date, payload.existing))


@router.get("/{year}", response_model=list[PayPeriod])
async def list_yearly_periods(resolver: Resolver, year: int = Path(ge=2, le=9998)):
    """All periods starting in ``year``."""
    return resolver.yearly_periods(year)
