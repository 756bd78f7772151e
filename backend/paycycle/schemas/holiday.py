from datetime import date as Date

from paycycle.schemas.base import CamelModel


class Holiday(CamelModel):
    date: Date
    name: str
