"""
Earnings API – YTD and quarterly gross pay
"""
from fastapi import APIRouter

from paycycle.api.deps import unprocessable
from paycycle.core.exceptions import PayrollError
from paycycle.schemas.earnings import (
    EarningsReport,
    EarningsRequest,
    LeaveUsageRequest,
    LeaveUsageSummary,
    QuarterEarningsRequest,
)
from paycycle.services.earnings_service import (
    aggregate,
    dated_results,
    grand_totals,
    leave_usage_summary,
    quarter_range,
    year_range,
)

router = APIRouter(prefix="/earnings", tags=["earnings"])


def _report(pairs, range_start, range_end) -> EarningsReport:
    records = aggregate(pairs, range_start, range_end)
    # only employees with earnings in range, as on the summary page
    rows = [r for r in records.values() if r.total_gross > 0]
    return EarningsReport(
        range_start=range_start,
        range_end=range_end,
        records=rows,
        totals=grand_totals(rows),
    )


@router.post("/ytd", response_model=EarningsReport)
async def earnings_in_range(payload: EarningsRequest):
    """Gross pay per employee for period ends within [rangeStart, rangeEnd]."""
    pairs = [(item.period_end, item.result) for item in payload.results]
    pairs += dated_results(payload.payrolls)
    try:
        return _report(pairs, payload.range_start, payload.range_end)
    except PayrollError as exc:
        raise unprocessable(exc)


@router.post("/quarter", response_model=EarningsReport)
async def earnings_by_quarter(payload: QuarterEarningsRequest):
    """One quarter of ``year``, or the whole year when no quarter is given."""
    try:
        if payload.quarter is None:
            range_start, range_end = year_range(payload.year)
        else:
            range_start, range_end = quarter_range(payload.year, payload.quarter)
        return _report(dated_results(payload.payrolls), range_start, range_end)
    except PayrollError as exc:
        raise unprocessable(exc)


@router.post("/leave", response_model=list[LeaveUsageSummary])
async def leave_usage(payload: LeaveUsageRequest):
    """Vacation, holiday and sick hours used in ``year`` next to the current balances."""
    return leave_usage_summary(payload.payrolls, payload.employees, payload.year)
