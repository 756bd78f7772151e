"""
Clock-punch rounding.

Only the minute of the hour matters:
  0       unchanged
  1–9     back to :00
  10–15   up to :15
  16–30   up to :30
  31–44   back to :30
  45–59   up to :00 of the next hour
Seconds and microseconds are always dropped.
"""
from datetime import datetime, timedelta


def round_time(ts: datetime) -> datetime:
    minutes = ts.minute
    rounded = ts.replace(second=0, microsecond=0)

    if 1 <= minutes <= 9:
        return rounded.replace(minute=0)
    if 10 <= minutes <= 15:
        return rounded.replace(minute=15)
    if 16 <= minutes <= 44:
        return rounded.replace(minute=30)
    if minutes >= 45:
        # timedelta keeps day/month/year rollover correct
        return rounded.replace(minute=0) + timedelta(hours=1)
    return rounded
