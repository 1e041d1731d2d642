# schoolgate/core/report.py
from datetime import date
from typing import Dict, Iterable, List, Optional

from schoolgate.core.clock import to_local
from schoolgate.core.compliance import is_late_return, leave_applies_on, leave_covers_checkpoint


def latest_return(leave, entries: Iterable) -> Optional[object]:
    """Most recent ENTRY of the leave's student that the leave accepts."""
    candidates = [
        r for r in entries
        if r.person_id == leave.student_id and leave_covers_checkpoint(leave, r.checkpoint_id)
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda r: (r.recorded_at, r.id))


def build_evening_report(
    leaves: Iterable,
    entries: Iterable,
    target_date: date,
    tz,
    student_names: Optional[Dict[int, str]] = None,
) -> List[dict]:
    """
    Join tonight's evening leaves with the students' return entries.

    `entries` are the STUDENT ENTRY records already limited to the return
    window of `target_date`. Leaves that do not apply on that date are skipped.
    """
    student_names = student_names or {}
    entries = list(entries)
    rows = []
    for leave in sorted(leaves, key=lambda l: l.id):
        if not leave_applies_on(leave, target_date):
            continue

        record = latest_return(leave, entries)
        return_time = None
        is_late = False
        if record is not None:
            local_return = to_local(record.recorded_at, tz)
            return_time = local_return.replace(tzinfo=None)
            is_late = is_late_return(local_return.time(), leave.authorized_return_time)

        rows.append({
            "id": leave.id,
            "school_id": leave.school_id,
            "student_id": leave.student_id,
            "student_name": student_names.get(leave.student_id),
            "checkpoint_id": leave.checkpoint_id,
            "start_date": leave.start_date,
            "end_date": leave.end_date,
            "days_of_week": list(leave.days_of_week or []),
            "authorized_return_time": leave.authorized_return_time,
            "reason": leave.reason,
            "is_active": leave.is_active,
            "has_returned": record is not None,
            "return_record_id": record.id if record is not None else None,
            "return_time": return_time,
            "is_late": is_late,
        })
    return rows
