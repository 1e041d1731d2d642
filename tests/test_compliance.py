# tests/test_compliance.py
from datetime import date, datetime, time
from types import SimpleNamespace

import pytest

from schoolgate.core.compliance import (
    AUTHORIZED,
    LATE,
    UNAUTHORIZED,
    InvalidTimeWindow,
    TimeWindow,
    day_of_week,
    evaluate_checkpoint_event,
    evaluate_evening_return,
    is_late_return,
    leave_applies_on,
    leave_covers_checkpoint,
)

MONDAY = date(2026, 10, 19)
MAIN_GATE = [TimeWindow(1, time(7, 0), time(18, 0))]


def at(hour, minute=0, day=MONDAY):
    return datetime.combine(day, time(hour, minute))


def test_day_of_week_is_sunday_based():
    assert day_of_week(date(2026, 10, 18)) == 0  # Sunday
    assert day_of_week(MONDAY) == 1
    assert day_of_week(date(2026, 10, 24)) == 6  # Saturday


@pytest.mark.parametrize("moment", [at(0, 1), at(7, 30), at(12), at(23, 59)])
def test_no_windows_is_always_unauthorized(moment):
    assert evaluate_checkpoint_event(moment, []) == UNAUTHORIZED


def test_no_window_on_that_day_is_unauthorized():
    tuesday = date(2026, 10, 20)
    assert evaluate_checkpoint_event(at(9, day=tuesday), MAIN_GATE) == UNAUTHORIZED


def test_main_gate_morning_entry_is_authorized():
    assert evaluate_checkpoint_event(at(7, 30), MAIN_GATE) == AUTHORIZED


def test_window_bounds_are_inclusive():
    assert evaluate_checkpoint_event(at(7, 0), MAIN_GATE) == AUTHORIZED
    assert evaluate_checkpoint_event(at(18, 0), MAIN_GATE) == AUTHORIZED


def test_main_gate_evening_entry_is_late_without_grace_limit():
    assert evaluate_checkpoint_event(at(19, 0), MAIN_GATE) == LATE


def test_grace_limit_turns_late_into_unauthorized():
    assert evaluate_checkpoint_event(at(18, 20), MAIN_GATE, late_grace_minutes=30) == LATE
    assert evaluate_checkpoint_event(at(18, 30), MAIN_GATE, late_grace_minutes=30) == LATE
    assert evaluate_checkpoint_event(at(19, 0), MAIN_GATE, late_grace_minutes=30) == UNAUTHORIZED


def test_before_first_window_is_unauthorized():
    assert evaluate_checkpoint_event(at(6, 59), MAIN_GATE) == UNAUTHORIZED


def test_between_windows_is_late_after_the_closed_one():
    windows = [
        TimeWindow(1, time(16, 0), time(20, 0)),
        TimeWindow(1, time(7, 0), time(9, 0)),
    ]
    assert evaluate_checkpoint_event(at(8), windows) == AUTHORIZED
    assert evaluate_checkpoint_event(at(17), windows) == AUTHORIZED
    assert evaluate_checkpoint_event(at(12), windows) == LATE
    # grace measured from the closest preceding window, 09:00
    assert evaluate_checkpoint_event(at(9, 10), windows, late_grace_minutes=15) == LATE
    assert evaluate_checkpoint_event(at(12), windows, late_grace_minutes=15) == UNAUTHORIZED


def test_overlapping_windows_do_not_depend_on_order():
    a = TimeWindow(1, time(7, 0), time(12, 0))
    b = TimeWindow(1, time(10, 0), time(15, 0))
    for windows in ([a, b], [b, a]):
        assert evaluate_checkpoint_event(at(11), windows) == AUTHORIZED
        assert evaluate_checkpoint_event(at(16), windows) == LATE


def test_windows_of_other_days_are_ignored():
    windows = MAIN_GATE + [TimeWindow(2, time(19, 0), time(22, 0))]
    assert evaluate_checkpoint_event(at(19, 30), windows) == LATE


@pytest.mark.parametrize("start,end", [(time(18, 0), time(7, 0)), (time(9, 0), time(9, 0))])
def test_window_must_open_before_it_closes(start, end):
    with pytest.raises(InvalidTimeWindow):
        TimeWindow(1, start, end)


def test_window_day_must_be_valid():
    with pytest.raises(InvalidTimeWindow):
        TimeWindow(7, time(7, 0), time(8, 0))


def test_evening_return_boundaries():
    return_by = time(21, 0)
    assert is_late_return(time(20, 59), return_by) is False
    assert is_late_return(time(21, 0), return_by) is False
    assert is_late_return(time(21, 1), return_by) is True
    assert evaluate_evening_return(at(20, 59), return_by) == AUTHORIZED
    assert evaluate_evening_return(at(21, 1), return_by) == LATE


def _leave(**overrides):
    fields = dict(
        is_active=True,
        start_date=date(2026, 10, 1),
        end_date=date(2026, 10, 31),
        days_of_week=[1, 2, 3, 4, 5],
        checkpoint_id=None,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_leave_applies_within_range_on_listed_days():
    leave = _leave()
    assert leave_applies_on(leave, MONDAY)
    assert not leave_applies_on(leave, date(2026, 10, 18))  # Sunday
    assert not leave_applies_on(leave, date(2026, 11, 2))  # after end_date
    assert not leave_applies_on(_leave(is_active=False), MONDAY)
    assert leave_applies_on(_leave(start_date=MONDAY, end_date=MONDAY), MONDAY)


def test_unscoped_leave_covers_every_checkpoint():
    assert leave_covers_checkpoint(_leave(), 42)
    assert leave_covers_checkpoint(_leave(checkpoint_id=3), 3)
    assert not leave_covers_checkpoint(_leave(checkpoint_id=3), 4)
