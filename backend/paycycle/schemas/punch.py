from datetime import date as Date, datetime as DateTime
from decimal import Decimal
from typing import Literal

from pydantic import ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from paycycle.schemas.base import CamelModel
from paycycle.schemas.pay_period import PayPeriod

DisplayState = Literal["none", "single", "active", "multiple"]


class RawPunch(CamelModel):
    employee_id: str
    time_in: DateTime
    time_out: DateTime | None = None  # None → still clocked in

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @property
    def is_open(self) -> bool:
        return self.time_out is None


class DailySummary(CamelModel):
    employee_id: str
    date: Date
    total_minutes: int = 0
    punches: list[RawPunch] = []

    @computed_field
    @property
    def punch_count(self) -> int:
        return len(self.punches)

    @computed_field
    @property
    def has_open_punch(self) -> bool:
        return any(p.is_open for p in self.punches)

    @computed_field
    @property
    def total_hours(self) -> Decimal:
        return (Decimal(self.total_minutes) / 60).quantize(Decimal("0.01"))

    @computed_field
    @property
    def display_state(self) -> DisplayState:
        if not self.punches:
            return "none"
        if len(self.punches) > 1:
            return "multiple"
        return "active" if self.punches[0].is_open else "single"


class PeriodTimesheet(CamelModel):
    employee_id: str
    period: PayPeriod
    days: list[DailySummary]

    @computed_field
    @property
    def total_minutes(self) -> int:
        return sum(d.total_minutes for d in self.days)

    @computed_field
    @property
    def total_hours(self) -> Decimal:
        return (Decimal(self.total_minutes) / 60).quantize(Decimal("0.01"))


class DailySummaryRequest(CamelModel):
    day: Date
    employee_id: str | None = None
    punches: list[RawPunch]
    apply_rounding: bool = True


class PeriodTimesheetRequest(CamelModel):
    employee_id: str
    day: Date  # any date inside the wanted period
    punches: list[RawPunch]
    apply_rounding: bool = True


class RoundRequest(CamelModel):
    timestamps: list[DateTime]
