from datetime import date
from decimal import Decimal

from paycycle.schemas.base import CamelModel
from paycycle.schemas.payroll import EmployeeRates, Payroll, PayrollResult

ZERO = Decimal("0")


class PeriodEarnings(CamelModel):
    period_end: date
    gross_check_amount: Decimal
    gross_other_amount: Decimal
    total_gross: Decimal


class YtdRecord(CamelModel):
    employee_id: str
    name: str = ""
    total_gross_check: Decimal = ZERO
    total_gross_other: Decimal = ZERO
    total_gross: Decimal = ZERO
    per_period_breakdown: list[PeriodEarnings] = []


class EarningsTotals(CamelModel):
    total_gross_check: Decimal = ZERO
    total_gross_other: Decimal = ZERO
    total_gross: Decimal = ZERO


class DatedResult(CamelModel):
    period_end: date
    result: PayrollResult


class EarningsRequest(CamelModel):
    range_start: date
    range_end: date
    results: list[DatedResult] = []
    payrolls: list[Payroll] = []


class QuarterEarningsRequest(CamelModel):
    year: int
    quarter: int | None = None  # None → whole year
    payrolls: list[Payroll]


class EarningsReport(CamelModel):
    range_start: date
    range_end: date
    records: list[YtdRecord]
    totals: EarningsTotals


class LeaveHours(CamelModel):
    vacation: Decimal = ZERO
    holiday: Decimal = ZERO
    sick: Decimal = ZERO


class LeaveUsageSummary(CamelModel):
    employee_id: str
    used: LeaveHours
    remaining: LeaveHours
    initial: LeaveHours


class LeaveUsageRequest(CamelModel):
    year: int
    payrolls: list[Payroll]
    employees: list[EmployeeRates]
