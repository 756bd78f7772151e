"""
Timesheet API – punch rounding and daily / per-period totals
"""
from datetime import datetime

from fastapi import APIRouter

from paycycle.api.deps import Resolver
from paycycle.schemas.punch import (
    DailySummary,
    DailySummaryRequest,
    PeriodTimesheet,
    PeriodTimesheetRequest,
    RoundRequest,
)
from paycycle.services.punch_service import summarize_day, summarize_period
from paycycle.utils.time_rounding import round_time

router = APIRouter(prefix="/timesheet", tags=["timesheet"])


@router.post("/round", response_model=list[datetime])
async def round_timestamps(payload: RoundRequest):
    return [round_time(ts) for ts in payload.timestamps]


@router.post("/daily", response_model=DailySummary)
async def daily_summary(payload: DailySummaryRequest):
    rounder = round_time if payload.apply_rounding else None
    return summarize_day(payload.punches, payload.day, payload.employee_id, rounder)


@router.post("/period", response_model=PeriodTimesheet)
async def period_timesheet(payload: PeriodTimesheetRequest, resolver: Resolver):
    """Per-day totals for the pay period that contains ``day``."""
    period = resolver.period_containing(payload.day)
    rounder = round_time if payload.apply_rounding else None
    return summarize_period(payload.punches, period, payload.employee_id, rounder)
