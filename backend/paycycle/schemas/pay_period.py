from datetime import date, timedelta

from pydantic import ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from paycycle.schemas.base import CamelModel


class PayPeriod(CamelModel):
    """A 14-day Sunday–Saturday span and the date it is paid on."""

    start: date
    end: date
    pay_date: date

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range((self.end - self.start).days + 1)]

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.start.isoformat()} - {self.end.isoformat()}"


class DateRange(CamelModel):
    from_date: date
    to_date: date
