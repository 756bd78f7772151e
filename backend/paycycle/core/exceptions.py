"""
Typed errors raised by the payroll engine.

Every error names the offending field and, where known, the employee, so the
caller can point the user at the exact input that was rejected.
"""
from decimal import Decimal


class PayrollError(Exception):
    code = "payroll_error"

    def __init__(self, message: str, field: str | None = None, employee_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.employee_id = employee_id

    def detail(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "field": self.field,
            "employee_id": self.employee_id,
        }


class InvalidInput(PayrollError):
    """Negative hours, rates or adjustments, or an unparseable value."""
    code = "invalid_input"


class InsufficientBalance(PayrollError):
    """Leave usage exceeds the employee's current balance."""
    code = "insufficient_balance"

    def __init__(
        self,
        field: str,
        employee_id: str | None,
        requested: Decimal,
        available: Decimal,
    ):
        super().__init__(
            f"{field} of {requested} exceeds available balance of {available}",
            field=field,
            employee_id=employee_id,
        )
        self.requested = requested
        self.available = available

    def detail(self) -> dict:
        data = super().detail()
        data["requested"] = str(self.requested)
        data["available"] = str(self.available)
        return data


class AmbiguousPeriod(PayrollError):
    """A date did not resolve to a well-formed pay period."""
    code = "ambiguous_period"


class PayrollValidationError(PayrollError):
    """Collects the per-employee failures of a whole payroll run."""
    code = "payroll_validation_error"

    def __init__(self, errors: list[PayrollError]):
        employees = ", ".join(sorted({e.employee_id or "?" for e in errors}))
        super().__init__(f"{len(errors)} payroll input(s) rejected for: {employees}")
        self.errors = errors

    def detail(self) -> dict:
        data = super().detail()
        data["errors"] = [e.detail() for e in self.errors]
        return data
