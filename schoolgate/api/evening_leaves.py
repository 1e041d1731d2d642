# schoolgate/api/evening_leaves.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from schoolgate.api.checkpoints import get_owned_checkpoint
from schoolgate.api.deps import check_school_access, get_current_user, get_db, get_school_id, require_admin
from schoolgate.core.clock import local_today
from schoolgate.crud import evening_leave as crud_leave
from schoolgate.crud import person as crud_person
from schoolgate.crud.school import school_timezone
from schoolgate.db.models.user import User
from schoolgate.schemas.common import Envelope, ok
from schoolgate.schemas.evening_leave import (
    EveningLeaveCreate,
    EveningLeaveOut,
    EveningLeaveUpdate,
    EveningReportRow,
)

router = APIRouter()


def get_owned_leave(db: Session, leave_id: int, current_user: User):
    leave = crud_leave.get_leave(db, leave_id)
    if not leave or leave.school_id != current_user.school_id:
        raise HTTPException(status_code=404, detail="Evening leave not found")
    return leave


@router.get("/evening-leaves", response_model=Envelope[List[EveningLeaveOut]])
def list_leaves(
    school_id: int = Depends(get_school_id),
    student_id: Optional[int] = None,
    is_active: Optional[bool] = None,
    on_date: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    return ok(crud_leave.get_leaves(db, school_id, student_id=student_id, is_active=is_active, on_date=on_date))


@router.post("/evening-leaves", response_model=Envelope[EveningLeaveOut], status_code=201)
def create_leave(
    leave_in: EveningLeaveCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    check_school_access(leave_in.school_id, current_user)
    student = crud_person.get_student(db, leave_in.student_id)
    if not student or student.school_id != leave_in.school_id:
        raise HTTPException(status_code=400, detail="Student not found")
    if leave_in.checkpoint_id is not None:
        get_owned_checkpoint(db, leave_in.checkpoint_id, current_user)
    return ok(crud_leave.create_leave(db, leave_in, created_by=current_user.id))


@router.get("/evening-leaves/report", response_model=Envelope[List[EveningReportRow]])
def get_report(
    school_id: int = Depends(get_school_id),
    report_date: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    tz = school_timezone(db, school_id)
    target = report_date or local_today(tz)
    return ok(crud_leave.get_report(db, school_id, target, tz))


@router.get("/evening-leaves/active/{student_id}", response_model=Envelope[List[EveningLeaveOut]])
def get_active_for_student(
    student_id: int,
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
):
    tz = school_timezone(db, school_id)
    return ok(crud_leave.get_active_for_student(db, school_id, student_id, local_today(tz)))


@router.get("/evening-leaves/{leave_id}", response_model=Envelope[EveningLeaveOut])
def get_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return ok(get_owned_leave(db, leave_id, current_user))


@router.put("/evening-leaves/{leave_id}", response_model=Envelope[EveningLeaveOut])
def update_leave(
    leave_id: int,
    leave_update: EveningLeaveUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    leave = get_owned_leave(db, leave_id, current_user)
    if leave_update.checkpoint_id is not None:
        get_owned_checkpoint(db, leave_update.checkpoint_id, current_user)

    start = leave_update.start_date or leave.start_date
    end = leave_update.end_date or leave.end_date
    if start > end:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")

    return ok(crud_leave.update_leave(db, leave, leave_update))


@router.delete("/evening-leaves/{leave_id}", response_model=Envelope)
def delete_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    leave = get_owned_leave(db, leave_id, current_user)
    crud_leave.delete_leave(db, leave)
    return ok()
