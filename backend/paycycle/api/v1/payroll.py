"""
Payroll API – per-period payroll calculation (stateless; the caller stores the snapshot)
"""
from fastapi import APIRouter, status

from paycycle.api.deps import Calculator, Resolver, unprocessable
from paycycle.core.exceptions import PayrollError
from paycycle.schemas.payroll import (
    Payroll,
    PayrollCalculateRequest,
    PayrollResult,
    PayrollRunRequest,
)

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.post("/calculate", response_model=PayrollResult, status_code=status.HTTP_200_OK)
async def calculate_payroll(payload: PayrollCalculateRequest, calculator: Calculator):
    """
    Calculate gross pay and new leave balances for one employee.
    Rejected inputs return 422 with the offending field and employee.
    """
    try:
        return calculator.compute(payload.input, payload.employee)
    except PayrollError as exc:
        raise unprocessable(exc)


@router.post("/run", response_model=Payroll)
async def run_payroll(payload: PayrollRunRequest, calculator: Calculator, resolver: Resolver):
    """
    Calculate ALL employees of the pay period containing ``periodDay``.
    Any rejected input fails the whole run; the 422 lists every failure.
    """
    period = resolver.period_containing(payload.period_day)
    try:
        return calculator.run_payroll(period, payload.inputs, payload.employees)
    except PayrollError as exc:
        raise unprocessable(exc)
