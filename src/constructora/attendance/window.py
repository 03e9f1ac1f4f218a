from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta


@dataclass(frozen=True)
class AttendanceWindow:
    """Daily self check-in window, half-open: [start, start + minutes)."""

    start: time
    minutes: int

    @property
    def end(self) -> time:
        return (datetime.combine(date.min, self.start) + timedelta(minutes=self.minutes)).time()

    def contains(self, now: datetime) -> bool:
        span = timedelta(minutes=self.minutes)
        today_start = now.replace(hour=self.start.hour, minute=self.start.minute, second=0, microsecond=0)
        # yesterday's window may still be open past midnight
        return any(start <= now < start + span for start in (today_start, today_start - timedelta(days=1)))

    def label(self) -> str:
        return f"{self.start:%H:%M}-{self.end:%H:%M}"
