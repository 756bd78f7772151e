from datetime import date
from decimal import Decimal

from pydantic import ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from paycycle.schemas.base import CamelModel

ZERO = Decimal("0")


class EmployeePayrollInput(CamelModel):
    employee_id: str
    name: str = ""
    total_hours_worked: Decimal = ZERO  # informational, from punch aggregation
    check_hours: Decimal = ZERO
    other_hours: Decimal = ZERO
    vd_hours_used: Decimal = ZERO
    hd_hours_used: Decimal = ZERO
    sd_hours_used: Decimal = ZERO
    other_adjustment: Decimal = ZERO
    comment: str | None = None


class EmployeeRates(CamelModel):
    """The employee record fields the calculator reads."""

    employee_id: str
    pay_rate_check: Decimal
    pay_rate_others: Decimal = ZERO
    vacation_balance: Decimal = ZERO
    holiday_balance: Decimal = ZERO
    sick_day_balance: Decimal = ZERO


class PayrollResult(CamelModel):
    employee_id: str
    name: str = ""
    pay_rate_check: Decimal
    pay_rate_others: Decimal
    other_adjustment: Decimal
    gross_check_amount: Decimal
    gross_other_amount: Decimal
    new_vacation_balance: Decimal
    new_holiday_balance: Decimal
    new_sick_day_balance: Decimal
    taxes: Decimal = ZERO
    net_check_amount: Decimal = ZERO

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @computed_field
    @property
    def total_gross(self) -> Decimal:
        return self.gross_check_amount + self.gross_other_amount


class PayrollTotals(CamelModel):
    gross_check_amount: Decimal = ZERO
    gross_other_amount: Decimal = ZERO
    other_adjustment: Decimal = ZERO
    taxes: Decimal = ZERO
    net_check_amount: Decimal = ZERO
    total_gross: Decimal = ZERO


class Payroll(CamelModel):
    """Immutable snapshot of one payroll run; one per pay period."""

    from_date: date
    to_date: date
    pay_date: date
    results: list[PayrollResult] = []
    inputs: list[EmployeePayrollInput] = []

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @computed_field
    @property
    def totals(self) -> PayrollTotals:
        totals = PayrollTotals()
        for r in self.results:
            totals.gross_check_amount += r.gross_check_amount
            totals.gross_other_amount += r.gross_other_amount
            totals.other_adjustment += r.other_adjustment
            totals.taxes += r.taxes
            totals.net_check_amount += r.net_check_amount
            totals.total_gross += r.total_gross
        return totals


class PayrollCalculateRequest(CamelModel):
    input: EmployeePayrollInput
    employee: EmployeeRates


class PayrollRunRequest(CamelModel):
    # any date inside the period being paid
    period_day: date
    inputs: list[EmployeePayrollInput]
    employees: list[EmployeeRates]
