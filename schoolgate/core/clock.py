# schoolgate/core/clock.py
"""Conversions between stored UTC timestamps and a school's wall clock.

Timestamps are persisted as naive UTC. Compliance decisions are made on the
school's local time, so every read or write that crosses that boundary goes
through these helpers.
"""
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple

import pytz

from schoolgate.core.config import settings


def utcnow() -> datetime:
    """Current moment as naive UTC, the storage format."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_timezone(name: Optional[str] = None):
    return pytz.timezone(name or settings.SCHOOL_TIMEZONE)


def to_local(moment: datetime, tz) -> datetime:
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return moment.astimezone(tz)


def to_storage(moment: datetime, tz) -> datetime:
    """Naive local or aware datetime -> naive UTC."""
    if moment.tzinfo is None:
        moment = tz.localize(moment)
    return moment.astimezone(pytz.utc).replace(tzinfo=None)


def local_today(tz) -> date:
    return to_local(utcnow(), tz).date()


def local_day_bounds(day: date, tz, start: time = time(0, 0)) -> Tuple[datetime, datetime]:
    """[start of `day` at `start`, start of the next day) as naive UTC."""
    lower = to_storage(datetime.combine(day, start), tz)
    upper = to_storage(datetime.combine(day + timedelta(days=1), time(0, 0)), tz)
    return lower, upper


def parse_clock(value: str) -> time:
    """'HH:MM' or 'HH:MM:SS' -> time."""
    return time.fromisoformat(value)
