# schoolgate/crud/entry_exit.py
import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from schoolgate.core.clock import local_day_bounds, parse_clock, to_local
from schoolgate.core.compliance import (
    InvalidTimeWindow,
    TimeWindow,
    evaluate_checkpoint_event,
    evaluate_evening_return,
)
from schoolgate.core.config import settings
from schoolgate.crud.evening_leave import find_applicable_leave
from schoolgate.crud.person import staff_names, student_names
from schoolgate.db.models.checkpoint import Checkpoint
from schoolgate.db.models.entry_exit import EntryExitRecord
from schoolgate.db.models.package import PackageDelivery
from schoolgate.schemas.entry_exit import RecordOut

logger = logging.getLogger(__name__)


def checkpoint_windows(checkpoint: Checkpoint) -> List[TimeWindow]:
    windows = []
    for row in checkpoint.authorized_times:
        try:
            windows.append(TimeWindow.from_row(row))
        except InvalidTimeWindow as e:
            # Rows written before validation existed; they can never match
            logger.warning(f"[EntryExit] Ignoring authorized time id={row.id} of checkpoint {checkpoint.id}: {e}")
    return windows


def left_earlier_today(db: Session, school_id: int, student_id: int, recorded_at: datetime, tz) -> bool:
    """True when the student has an EXIT before `recorded_at` on the same local day."""
    day_start, _ = local_day_bounds(to_local(recorded_at, tz).date(), tz)
    exit_record = (
        db.query(EntryExitRecord.id)
        .filter(
            EntryExitRecord.school_id == school_id,
            EntryExitRecord.person_type == "STUDENT",
            EntryExitRecord.record_type == "EXIT",
            EntryExitRecord.person_id == student_id,
            EntryExitRecord.recorded_at >= day_start,
            EntryExitRecord.recorded_at < recorded_at,
        )
        .first()
    )
    return exit_record is not None


def resolve_status(
    db: Session,
    checkpoint: Checkpoint,
    person_type: str,
    person_id: int,
    record_type: str,
    recorded_at: datetime,
    tz,
) -> str:
    """
    Status of an event at `recorded_at` (naive UTC), frozen onto the record.

    A student coming back in the evening after going out that day is judged by
    their evening leave, when one covers this checkpoint. Everything else, and
    any checkpoint without authorized times, goes by the checkpoint windows.
    """
    local_moment = to_local(recorded_at, tz).replace(tzinfo=None)
    windows = checkpoint_windows(checkpoint)

    evening_return = (
        windows
        and person_type == "STUDENT"
        and record_type == "ENTRY"
        and local_moment.time() >= parse_clock(settings.EVENING_RETURN_WINDOW_START)
        and left_earlier_today(db, checkpoint.school_id, person_id, recorded_at, tz)
    )
    if evening_return:
        leave = find_applicable_leave(db, checkpoint.school_id, person_id, checkpoint.id, local_moment.date())
        if leave is not None:
            return evaluate_evening_return(local_moment, leave.authorized_return_time)

    return evaluate_checkpoint_event(
        local_moment,
        windows,
        late_grace_minutes=settings.LATE_GRACE_MINUTES,
    )


def create_record(db: Session, data, checkpoint: Checkpoint, recorded_at: datetime, tz):
    status = resolve_status(
        db, checkpoint, data.person_type, data.person_id, data.record_type, recorded_at, tz
    )
    record = EntryExitRecord(
        school_id=data.school_id,
        checkpoint_id=checkpoint.id,
        person_id=data.person_id,
        person_type=data.person_type,
        record_type=data.record_type,
        status=status,
        description=data.description,
        recorded_at=recorded_at,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info(
        f"[EntryExit] {record.record_type} {record.person_type} id={record.person_id} "
        f"at checkpoint {checkpoint.id} -> {record.status}"
    )
    return record


def create_bulk_records(db: Session, data, checkpoint: Checkpoint, recorded_at: datetime, tz):
    records = []
    for person_id in data.person_ids:
        status = resolve_status(
            db, checkpoint, data.person_type, person_id, data.record_type, recorded_at, tz
        )
        record = EntryExitRecord(
            school_id=data.school_id,
            checkpoint_id=checkpoint.id,
            person_id=person_id,
            person_type=data.person_type,
            record_type=data.record_type,
            status=status,
            description=data.description,
            recorded_at=recorded_at,
        )
        db.add(record)
        records.append(record)
    db.commit()
    for record in records:
        db.refresh(record)
    logger.info(f"[EntryExit] Bulk {data.record_type}: {len(records)} record(s) at checkpoint {checkpoint.id}")
    return records


def get_records(
    db: Session,
    school_id: int,
    tz,
    checkpoint_id: Optional[int] = None,
    person_type: Optional[str] = None,
    record_type: Optional[str] = None,
    status: Optional[str] = None,
    person_id: Optional[int] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    limit: Optional[int] = None,
):
    query = (
        db.query(EntryExitRecord)
        .options(joinedload(EntryExitRecord.checkpoint))
        .filter(EntryExitRecord.school_id == school_id)
    )
    if checkpoint_id:
        query = query.filter(EntryExitRecord.checkpoint_id == checkpoint_id)
    if person_type:
        query = query.filter(EntryExitRecord.person_type == person_type)
    if record_type:
        query = query.filter(EntryExitRecord.record_type == record_type)
    if status:
        query = query.filter(EntryExitRecord.status == status)
    if person_id:
        query = query.filter(EntryExitRecord.person_id == person_id)
    # Date filters cover whole local days
    if date_from:
        query = query.filter(EntryExitRecord.recorded_at >= local_day_bounds(date_from, tz)[0])
    if date_to:
        query = query.filter(EntryExitRecord.recorded_at < local_day_bounds(date_to, tz)[1])

    query = query.order_by(EntryExitRecord.recorded_at.desc(), EntryExitRecord.id.desc())
    return query.limit(limit or settings.RECORDS_DEFAULT_LIMIT).all()


def enrich_records(db: Session, records: List[EntryExitRecord]) -> List[dict]:
    """Adds checkpoint_name and person_name to each record."""
    if not records:
        return []
    students = student_names(db, (r.person_id for r in records if r.person_type == "STUDENT"))
    staff = staff_names(db, (r.person_id for r in records if r.person_type == "STAFF"))

    result = []
    for r in records:
        names = students if r.person_type == "STUDENT" else staff
        item = RecordOut.model_validate(r).model_dump()
        item["person_name"] = names.get(r.person_id)
        result.append(item)
    return result


def get_stats(db: Session, school_id: int, today: date, tz) -> dict:
    lower, upper = local_day_bounds(today, tz)

    def count_today(record_type: str) -> int:
        return db.query(EntryExitRecord).filter(
            EntryExitRecord.school_id == school_id,
            EntryExitRecord.record_type == record_type,
            EntryExitRecord.recorded_at >= lower,
            EntryExitRecord.recorded_at < upper,
        ).count()

    entries = count_today("ENTRY")
    exits = count_today("EXIT")
    packages = db.query(PackageDelivery).filter(
        PackageDelivery.school_id == school_id,
        PackageDelivery.status == "pending",
    ).count()

    return {
        "entries": entries,
        "exits": exits,
        "inside": max(0, entries - exits),
        "packages": packages,
    }
