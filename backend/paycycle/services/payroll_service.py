"""
PayrollCalculator: gross pay and new leave balances for one pay period.

Leave hours (vacation, holiday, sick) are paid at the check rate. Usage that
exceeds a balance rejects the whole computation; nothing is clamped.
"""
import logging
from decimal import Decimal
from typing import Iterable

from paycycle.core.config import settings
from paycycle.core.exceptions import (
    InsufficientBalance,
    InvalidInput,
    PayrollError,
    PayrollValidationError,
)
from paycycle.schemas.pay_period import PayPeriod
from paycycle.schemas.payroll import EmployeePayrollInput, EmployeeRates, Payroll, PayrollResult
from paycycle.utils.money import money, to_decimal

logger = logging.getLogger(__name__)

INPUT_FIELDS = (
    "total_hours_worked",
    "check_hours",
    "other_hours",
    "vd_hours_used",
    "hd_hours_used",
    "sd_hours_used",
    "other_adjustment",
)
RATE_FIELDS = (
    "pay_rate_check",
    "pay_rate_others",
    "vacation_balance",
    "holiday_balance",
    "sick_day_balance",
)
# usage field → balance field
LEAVE_BALANCES = {
    "vd_hours_used": "vacation_balance",
    "hd_hours_used": "holiday_balance",
    "sd_hours_used": "sick_day_balance",
}


class PayrollCalculator:

    def __init__(self, tax_rate: float | Decimal | None = None):
        rate = settings.TAX_RATE if tax_rate is None else tax_rate
        self.tax_rate = to_decimal(rate)
        if self.tax_rate < 0 or self.tax_rate > 1:
            raise InvalidInput(f"tax rate must be between 0 and 1, got {rate}", field="TAX_RATE")

    def _validate(self, payroll_input: EmployeePayrollInput, employee: EmployeeRates) -> None:
        employee_id = payroll_input.employee_id
        if employee.employee_id != employee_id:
            raise InvalidInput(
                f"employee record {employee.employee_id} does not match input {employee_id}",
                field="employee_id",
                employee_id=employee_id,
            )

        for source, fields in ((payroll_input, INPUT_FIELDS), (employee, RATE_FIELDS)):
            for field in fields:
                value = to_decimal(getattr(source, field))
                if value < 0:
                    raise InvalidInput(f"{field} must not be negative, got {value}", field=field, employee_id=employee_id)

        for used_field, balance_field in LEAVE_BALANCES.items():
            used = to_decimal(getattr(payroll_input, used_field))
            available = to_decimal(getattr(employee, balance_field))
            if used > available:
                raise InsufficientBalance(used_field, employee_id, used, available)

    def compute(self, payroll_input: EmployeePayrollInput, employee: EmployeeRates) -> PayrollResult:
        """
        Pure: reads its two arguments and returns a new PayrollResult.
        Raises InvalidInput or InsufficientBalance instead of returning a
        partial result. The employee record is never modified.
        """
        try:
            self._validate(payroll_input, employee)
        except PayrollError as exc:
            logger.warning("Payroll input rejected for %s: %s", payroll_input.employee_id, exc.message)
            raise

        rate_check = to_decimal(employee.pay_rate_check)
        rate_others = to_decimal(employee.pay_rate_others)
        vd = to_decimal(payroll_input.vd_hours_used)
        hd = to_decimal(payroll_input.hd_hours_used)
        sd = to_decimal(payroll_input.sd_hours_used)
        adjustment = to_decimal(payroll_input.other_adjustment)

        gross_check = money(to_decimal(payroll_input.check_hours) * rate_check + (vd + hd + sd) * rate_check)
        gross_other = money(to_decimal(payroll_input.other_hours) * rate_others + adjustment)
        taxes = money(gross_check * self.tax_rate)

        result = PayrollResult(
            employee_id=payroll_input.employee_id,
            name=payroll_input.name,
            pay_rate_check=rate_check,
            pay_rate_others=rate_others,
            other_adjustment=money(adjustment),
            gross_check_amount=gross_check,
            gross_other_amount=gross_other,
            new_vacation_balance=to_decimal(employee.vacation_balance) - vd,
            new_holiday_balance=to_decimal(employee.holiday_balance) - hd,
            new_sick_day_balance=to_decimal(employee.sick_day_balance) - sd,
            taxes=taxes,
            net_check_amount=gross_check - taxes,
        )
        logger.debug(
            "Payroll %s: check=%s other=%s", result.employee_id, result.gross_check_amount, result.gross_other_amount
        )
        return result

    def run_payroll(
        self,
        period: PayPeriod,
        inputs: Iterable[EmployeePayrollInput],
        employees: Iterable[EmployeeRates],
    ) -> Payroll:
        """
        Compute every employee of a pay period into one Payroll snapshot.
        All failures are collected and raised together as a
        PayrollValidationError; no snapshot is produced if any input fails.
        """
        inputs = list(inputs)
        by_id = {e.employee_id: e for e in employees}
        seen: set[str] = set()
        results: list[PayrollResult] = []
        errors: list[PayrollError] = []

        for payroll_input in inputs:
            employee_id = payroll_input.employee_id
            if employee_id in seen:
                errors.append(InvalidInput("duplicate payroll input", field="employee_id", employee_id=employee_id))
                continue
            seen.add(employee_id)

            employee = by_id.get(employee_id)
            if employee is None:
                errors.append(InvalidInput("no employee record", field="employee_id", employee_id=employee_id))
                continue
            try:
                results.append(self.compute(payroll_input, employee))
            except PayrollError as exc:
                errors.append(exc)

        if errors:
            raise PayrollValidationError(errors)

        logger.info("Payroll %s computed for %d employee(s)", period.label, len(results))
        return Payroll(
            from_date=period.start,
            to_date=period.end,
            pay_date=period.pay_date,
            results=results,
            inputs=inputs,
        )


def apply_result(employee: EmployeeRates, result: PayrollResult) -> EmployeeRates:
    """New employee record carrying the balances of ``result``; persisting it is the caller's job."""
    if employee.employee_id != result.employee_id:
        raise InvalidInput(
            f"result for {result.employee_id} applied to {employee.employee_id}",
            field="employee_id",
            employee_id=employee.employee_id,
        )
    return employee.model_copy(
        update={
            "vacation_balance": result.new_vacation_balance,
            "holiday_balance": result.new_holiday_balance,
            "sick_day_balance": result.new_sick_day_balance,
        }
    )
