from datetime import date, datetime, time, timedelta
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Local wall-clock time."""
    return datetime.now()


def date_key(day) -> str:
    """Format a date (or datetime, on its own calendar day) as "YYYY-MM-DD"."""
    if isinstance(day, datetime):
        day = day.date()
    if not isinstance(day, date):
        raise TypeError(f"expected date or datetime, got {type(day).__name__}")
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def next_midnight(now: datetime) -> datetime:
    tomorrow = now.date() + timedelta(days=1)
    return datetime.combine(tomorrow, time.min, tzinfo=now.tzinfo)
