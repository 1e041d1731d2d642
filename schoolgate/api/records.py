# schoolgate/api/records.py
from datetime import date
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from schoolgate.api.checkpoints import get_owned_checkpoint
from schoolgate.api.deps import check_school_access, get_current_user, get_db, get_school_id
from schoolgate.core.clock import local_today, to_storage, utcnow
from schoolgate.crud import entry_exit as crud_records
from schoolgate.crud import person as crud_person
from schoolgate.crud.school import school_timezone
from schoolgate.db.models.user import User
from schoolgate.schemas.common import Envelope, ok
from schoolgate.schemas.entry_exit import BulkRecordCreate, EntryExitStats, RecordCreate, RecordOut

router = APIRouter()


def get_usable_checkpoint(db: Session, checkpoint_id: int, record_type: str, current_user: User):
    checkpoint = get_owned_checkpoint(db, checkpoint_id, current_user)
    if not checkpoint.is_active:
        raise HTTPException(status_code=400, detail=f"Checkpoint '{checkpoint.name}' is not active")
    if not checkpoint.accepts(record_type):
        raise HTTPException(
            status_code=400,
            detail=f"Checkpoint '{checkpoint.name}' does not accept {record_type} records",
        )
    return checkpoint


def check_person(db: Session, school_id: int, person_type: str, person_id: int):
    if not crud_person.person_exists(db, school_id, person_type, person_id):
        raise HTTPException(status_code=400, detail=f"{person_type.capitalize()} {person_id} not found")


@router.post("/records", response_model=Envelope[RecordOut], status_code=201)
def create_record(
    record_in: RecordCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    check_school_access(record_in.school_id, current_user)
    checkpoint = get_usable_checkpoint(db, record_in.checkpoint_id, record_in.record_type, current_user)
    check_person(db, record_in.school_id, record_in.person_type, record_in.person_id)

    tz = school_timezone(db, record_in.school_id)
    recorded_at = to_storage(record_in.recorded_at, tz) if record_in.recorded_at else utcnow()
    record = crud_records.create_record(db, record_in, checkpoint, recorded_at, tz)
    return ok(crud_records.enrich_records(db, [record])[0])


@router.post("/records/bulk", response_model=Envelope[List[RecordOut]], status_code=201)
def create_bulk_records(
    bulk_in: BulkRecordCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    check_school_access(bulk_in.school_id, current_user)
    checkpoint = get_usable_checkpoint(db, bulk_in.checkpoint_id, bulk_in.record_type, current_user)
    for person_id in bulk_in.person_ids:
        check_person(db, bulk_in.school_id, bulk_in.person_type, person_id)

    tz = school_timezone(db, bulk_in.school_id)
    records = crud_records.create_bulk_records(db, bulk_in, checkpoint, utcnow(), tz)
    return ok(crud_records.enrich_records(db, records))


@router.get("/records", response_model=Envelope[List[RecordOut]])
def list_records(
    school_id: int = Depends(get_school_id),
    checkpoint_id: Optional[int] = None,
    person_type: Optional[Literal["STUDENT", "STAFF"]] = None,
    record_type: Optional[Literal["ENTRY", "EXIT"]] = None,
    status: Optional[Literal["authorized", "late", "unauthorized"]] = None,
    person_id: Optional[int] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    limit: Optional[int] = Query(None, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    records = crud_records.get_records(
        db,
        school_id,
        school_timezone(db, school_id),
        checkpoint_id=checkpoint_id,
        person_type=person_type,
        record_type=record_type,
        status=status,
        person_id=person_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )
    return ok(crud_records.enrich_records(db, records))


@router.get("/stats", response_model=Envelope[EntryExitStats])
def get_stats(
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
):
    tz = school_timezone(db, school_id)
    return ok(crud_records.get_stats(db, school_id, local_today(tz), tz))
