# schoolgate/crud/evening_leave.py
import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from schoolgate.core.clock import local_day_bounds, parse_clock
from schoolgate.core.compliance import leave_applies_on, leave_covers_checkpoint
from schoolgate.core.config import settings
from schoolgate.core.report import build_evening_report
from schoolgate.crud.person import student_names
from schoolgate.db.models.entry_exit import EntryExitRecord
from schoolgate.db.models.evening_leave import EveningLeave

logger = logging.getLogger(__name__)


def create_leave(db: Session, data, created_by: int | None = None):
    leave = EveningLeave(**data.model_dump(), created_by=created_by)
    db.add(leave)
    db.commit()
    db.refresh(leave)
    logger.info(
        f"[EveningLeave] Created leave id={leave.id} for student {leave.student_id} "
        f"{leave.start_date}..{leave.end_date} days={leave.days_of_week} return by {leave.authorized_return_time}"
    )
    return leave


def get_leaves(
    db: Session,
    school_id: int,
    student_id: Optional[int] = None,
    is_active: Optional[bool] = None,
    on_date: Optional[date] = None,
):
    query = (
        db.query(EveningLeave)
        .options(joinedload(EveningLeave.student))
        .filter(EveningLeave.school_id == school_id)
    )
    if student_id:
        query = query.filter(EveningLeave.student_id == student_id)
    if is_active is not None:
        query = query.filter(EveningLeave.is_active.is_(is_active))
    if on_date:
        query = query.filter(EveningLeave.start_date <= on_date, EveningLeave.end_date >= on_date)
    return query.order_by(EveningLeave.created_at.desc(), EveningLeave.id.desc()).all()


def get_leave(db: Session, leave_id: int):
    return db.query(EveningLeave).filter(EveningLeave.id == leave_id).first()


def update_leave(db: Session, leave: EveningLeave, data):
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(leave, field, value)
    db.commit()
    db.refresh(leave)
    return leave


def delete_leave(db: Session, leave: EveningLeave):
    db.delete(leave)
    db.commit()
    logger.info(f"[EveningLeave] Deleted leave id={leave.id}")


def get_active_for_student(db: Session, school_id: int, student_id: int, day: date):
    """Leaves of the student that apply on `day` (date range, weekday and is_active)."""
    candidates = get_leaves(db, school_id, student_id=student_id, is_active=True, on_date=day)
    return [leave for leave in candidates if leave_applies_on(leave, day)]


def find_applicable_leave(db: Session, school_id: int, student_id: int, checkpoint_id: int, day: date):
    """
    The leave a return through `checkpoint_id` on `day` is judged against.
    With several, the latest return-by time wins.
    """
    leaves = [
        leave for leave in get_active_for_student(db, school_id, student_id, day)
        if leave_covers_checkpoint(leave, checkpoint_id)
    ]
    if not leaves:
        return None
    return max(leaves, key=lambda leave: (leave.authorized_return_time, leave.id))


def get_report(db: Session, school_id: int, target_date: date, tz):
    """Tonight's report: who is out on leave and whether they came back."""
    leaves = [
        leave for leave in get_leaves(db, school_id, is_active=True, on_date=target_date)
        if leave_applies_on(leave, target_date)
    ]
    if not leaves:
        return []

    student_ids = {leave.student_id for leave in leaves}
    lower, upper = local_day_bounds(target_date, tz, parse_clock(settings.EVENING_RETURN_WINDOW_START))
    entries = (
        db.query(EntryExitRecord)
        .filter(
            EntryExitRecord.school_id == school_id,
            EntryExitRecord.person_type == "STUDENT",
            EntryExitRecord.record_type == "ENTRY",
            EntryExitRecord.person_id.in_(student_ids),
            EntryExitRecord.recorded_at >= lower,
            EntryExitRecord.recorded_at < upper,
        )
        .all()
    )
    return build_evening_report(leaves, entries, target_date, tz, student_names(db, student_ids))
