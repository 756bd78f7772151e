"""
EarningsAggregator: year-to-date and quarterly gross-pay rollups from
historical payroll results, plus the yearly leave-usage summary.
"""
import logging
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable

from paycycle.core.exceptions import InvalidInput
from paycycle.schemas.earnings import (
    EarningsTotals,
    LeaveHours,
    LeaveUsageSummary,
    PeriodEarnings,
    YtdRecord,
)
from paycycle.schemas.payroll import EmployeeRates, Payroll, PayrollResult

logger = logging.getLogger(__name__)


def quarter_range(year: int, quarter: int) -> tuple[date, date]:
    if quarter not in (1, 2, 3, 4):
        raise InvalidInput(f"quarter must be 1..4, got {quarter}", field="quarter")
    first_month = (quarter - 1) * 3 + 1
    start = date(year, first_month, 1)
    end = date(year + 1, 1, 1) if quarter == 4 else date(year, first_month + 3, 1)
    return start, end - timedelta(days=1)


def year_range(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def aggregate(
    results: Iterable[tuple[date, PayrollResult]],
    range_start: date,
    range_end: date,
) -> dict[str, YtdRecord]:
    """
    Sum gross pay per employee over results whose period end lies in
    [range_start, range_end]. Breakdowns are ordered by period end.
    """
    if range_start > range_end:
        raise InvalidInput(f"range start {range_start} is after end {range_end}", field="range_start")

    selected = sorted(
        ((end, r) for end, r in results if range_start <= end <= range_end),
        key=lambda pair: pair[0],
    )

    records: dict[str, YtdRecord] = {}
    for period_end, result in selected:
        record = records.get(result.employee_id)
        if record is None:
            record = records[result.employee_id] = YtdRecord(employee_id=result.employee_id, name=result.name)
        record.total_gross_check += result.gross_check_amount
        record.total_gross_other += result.gross_other_amount
        record.total_gross = record.total_gross_check + record.total_gross_other
        record.per_period_breakdown.append(
            PeriodEarnings(
                period_end=period_end,
                gross_check_amount=result.gross_check_amount,
                gross_other_amount=result.gross_other_amount,
                total_gross=result.gross_check_amount + result.gross_other_amount,
            )
        )

    logger.debug("Aggregated %d result(s) for %d employee(s)", len(selected), len(records))
    return records


def dated_results(payrolls: Iterable[Payroll]) -> list[tuple[date, PayrollResult]]:
    return [(p.to_date, r) for p in payrolls for r in p.results]


def aggregate_payrolls(payrolls: Iterable[Payroll], range_start: date, range_end: date) -> dict[str, YtdRecord]:
    return aggregate(dated_results(payrolls), range_start, range_end)


def aggregate_quarter(payrolls: Iterable[Payroll], year: int, quarter: int) -> dict[str, YtdRecord]:
    return aggregate_payrolls(payrolls, *quarter_range(year, quarter))


def aggregate_year(payrolls: Iterable[Payroll], year: int) -> dict[str, YtdRecord]:
    return aggregate_payrolls(payrolls, *year_range(year))


def grand_totals(records: Iterable[YtdRecord]) -> EarningsTotals:
    totals = EarningsTotals()
    for record in records:
        totals.total_gross_check += record.total_gross_check
        totals.total_gross_other += record.total_gross_other
        totals.total_gross += record.total_gross
    return totals


def leave_usage_summary(
    payrolls: Iterable[Payroll],
    employees: Iterable[EmployeeRates],
    year: int,
) -> list[LeaveUsageSummary]:
    """
    Leave hours used per employee in ``year`` (by payroll end date), next to
    the current balance; the initial balance is remaining + used.
    """
    used: dict[str, dict[str, Decimal]] = defaultdict(lambda: defaultdict(Decimal))
    for payroll in payrolls:
        if payroll.to_date.year != year:
            continue
        for item in payroll.inputs:
            used[item.employee_id]["vacation"] += item.vd_hours_used
            used[item.employee_id]["holiday"] += item.hd_hours_used
            used[item.employee_id]["sick"] += item.sd_hours_used

    summaries = []
    for emp in employees:
        u = used.get(emp.employee_id, {})
        used_hours = LeaveHours(
            vacation=u.get("vacation", Decimal("0")),
            holiday=u.get("holiday", Decimal("0")),
            sick=u.get("sick", Decimal("0")),
        )
        remaining = LeaveHours(
            vacation=emp.vacation_balance,
            holiday=emp.holiday_balance,
            sick=emp.sick_day_balance,
        )
        summaries.append(
            LeaveUsageSummary(
                employee_id=emp.employee_id,
                used=used_hours,
                remaining=remaining,
                initial=LeaveHours(
                    vacation=remaining.vacation + used_hours.vacation,
                    holiday=remaining.holiday + used_hours.holiday,
                    sick=remaining.sick + used_hours.sick,
                ),
            )
        )
    return summaries
