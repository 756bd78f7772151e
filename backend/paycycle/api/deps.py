from typing import Annotated

from fastapi import Depends, HTTPException, status

from paycycle.core.exceptions import PayrollError
from paycycle.services.pay_period_service import PayPeriodResolver, get_resolver
from paycycle.services.payroll_service import PayrollCalculator


def get_calculator() -> PayrollCalculator:
    return PayrollCalculator()


def unprocessable(exc: PayrollError) -> HTTPException:
    """422 naming the rejected field and employee."""
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=exc.detail(),
    )


Resolver = Annotated[PayPeriodResolver, Depends(get_resolver)]
Calculator = Annotated[PayrollCalculator, Depends(get_calculator)]
