# schoolgate/core/compliance.py
"""Checkpoint compliance rules.

Everything here is pure: callers pass the moment of the event already
converted to the school's local time, together with the windows that apply,
and store whatever status comes back on the record they are creating.
"""
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, List, Optional

AUTHORIZED = "authorized"
LATE = "late"
UNAUTHORIZED = "unauthorized"

STATUSES = (AUTHORIZED, LATE, UNAUTHORIZED)


class InvalidTimeWindow(ValueError):
    pass


@dataclass(frozen=True)
class TimeWindow:
    day_of_week: int  # 0=Sun, 6=Sat
    start_time: time
    end_time: time

    def __post_init__(self):
        if not 0 <= self.day_of_week <= 6:
            raise InvalidTimeWindow(f"day_of_week must be between 0 and 6, got {self.day_of_week}")
        if self.start_time >= self.end_time:
            raise InvalidTimeWindow(
                f"start_time {self.start_time:%H:%M} must be before end_time {self.end_time:%H:%M}"
            )

    def contains(self, moment: time) -> bool:
        return self.start_time <= moment <= self.end_time

    @classmethod
    def from_row(cls, row) -> "TimeWindow":
        return cls(row.day_of_week, row.start_time, row.end_time)


def day_of_week(day: date) -> int:
    """Sunday-based day index (0=Sun ... 6=Sat)."""
    return (day.weekday() + 1) % 7


def windows_for_day(windows: Iterable[TimeWindow], dow: int) -> List[TimeWindow]:
    return sorted(
        (w for w in windows if w.day_of_week == dow),
        key=lambda w: (w.start_time, w.end_time),
    )


def _minutes_between(earlier: time, later: time) -> float:
    anchor = date(2000, 1, 1)
    delta = datetime.combine(anchor, later) - datetime.combine(anchor, earlier)
    return delta.total_seconds() / 60


def evaluate_checkpoint_event(
    moment: datetime,
    windows: Iterable[TimeWindow],
    late_grace_minutes: Optional[int] = None,
) -> str:
    """
    Classify an entry/exit event against a checkpoint's authorized times.

    - no window on that day -> unauthorized
    - inside [start, end] of a window (both ends inclusive) -> authorized
    - after the end of the closest preceding window -> late, or unauthorized
      once more than `late_grace_minutes` have passed (when a limit is set)
    - before the first window of the day opens -> unauthorized
    """
    todays = windows_for_day(windows, day_of_week(moment.date()))
    if not todays:
        return UNAUTHORIZED

    clock = moment.time()
    for window in todays:
        if window.contains(clock):
            return AUTHORIZED

    closed = [w for w in todays if w.end_time < clock]
    if not closed:
        return UNAUTHORIZED

    if late_grace_minutes is None:
        return LATE

    closest = max(closed, key=lambda w: w.end_time)
    if _minutes_between(closest.end_time, clock) <= late_grace_minutes:
        return LATE
    return UNAUTHORIZED


def is_late_return(return_time: time, authorized_return_time: time) -> bool:
    # Returning exactly at the authorized time is on time
    return return_time > authorized_return_time


def evaluate_evening_return(moment: datetime, authorized_return_time: time) -> str:
    if is_late_return(moment.time(), authorized_return_time):
        return LATE
    return AUTHORIZED


def leave_applies_on(leave, day: date) -> bool:
    """True when an evening leave is active and covers `day`."""
    if not leave.is_active:
        return False
    if not (leave.start_date <= day <= leave.end_date):
        return False
    return day_of_week(day) in (leave.days_of_week or [])


def leave_covers_checkpoint(leave, checkpoint_id: int) -> bool:
    # An unscoped leave covers every checkpoint
    return leave.checkpoint_id is None or leave.checkpoint_id == checkpoint_id
