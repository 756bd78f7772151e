from paycycle.schemas.pay_period import PayPeriod, DateRange
from paycycle.schemas.punch import RawPunch, DailySummary, PeriodTimesheet
from paycycle.schemas.payroll import (
    EmployeePayrollInput, EmployeeRates, PayrollResult, PayrollTotals, Payroll,
)
from paycycle.schemas.earnings import (
    PeriodEarnings, YtdRecord, EarningsTotals, LeaveHours, LeaveUsageSummary,
)
from paycycle.schemas.holiday import Holiday

__all__ = [
    "PayPeriod", "DateRange",
    "RawPunch", "DailySummary", "PeriodTimesheet",
    "EmployeePayrollInput", "EmployeeRates", "PayrollResult", "PayrollTotals", "Payroll",
    "PeriodEarnings", "YtdRecord", "EarningsTotals", "LeaveHours", "LeaveUsageSummary",
    "Holiday",
]
