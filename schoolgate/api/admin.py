# schoolgate/api/admin.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from schoolgate.api.deps import check_school_access, get_db, get_school_id, require_admin
from schoolgate.crud import person as crud_person
from schoolgate.crud import user as crud_user
from schoolgate.db.models.user import User
from schoolgate.schemas.common import Envelope, ok
from schoolgate.schemas.person import StaffCreate, StaffOut, StudentCreate, StudentOut, StudentUpdate
from schoolgate.schemas.user import UserCreate, UserOut

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/users", response_model=Envelope[List[UserOut]])
def get_users(
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return ok(crud_user.get_users_by_school(db, school_id))


@router.post("/users", response_model=Envelope[UserOut], status_code=201)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if crud_user.get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    # New accounts always belong to the admin's school
    return ok(crud_user.create_user(db, user_in, school_id=current_user.school_id))


@router.get("/students", response_model=Envelope[List[StudentOut]])
def get_students(
    include_inactive: bool = False,
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return ok(crud_person.get_students(db, school_id, include_inactive=include_inactive))


@router.post("/students", response_model=Envelope[StudentOut], status_code=201)
def create_student(
    student_in: StudentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    check_school_access(student_in.school_id, current_user)
    return ok(crud_person.create_student(db, student_in))


@router.put("/students/{student_id}", response_model=Envelope[StudentOut])
def update_student(
    student_id: int,
    student_update: StudentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    student = crud_person.get_student(db, student_id)
    if not student or student.school_id != current_user.school_id:
        raise HTTPException(status_code=404, detail="Student not found")

    try:
        student = crud_person.update_student(db, student, student_update)
    except SQLAlchemyError:
        logger.exception(f"[Admin] Failed to update student id={student_id}")
        db.rollback()
        raise HTTPException(status_code=500, detail="Could not save the student")

    logger.info(f"[Admin] Student id={student_id} updated")
    return ok(student)


@router.delete("/students/{student_id}", response_model=Envelope)
def delete_student(
    student_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    student = crud_person.get_student(db, student_id)
    if not student or student.school_id != current_user.school_id:
        raise HTTPException(status_code=404, detail="Student not found")

    crud_person.delete_student(db, student)
    logger.info(f"[Admin] Student id={student_id} deleted")
    return ok()


@router.get("/staff", response_model=Envelope[List[StaffOut]])
def get_staff(
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return ok(crud_person.get_staff(db, school_id))


@router.post("/staff", response_model=Envelope[StaffOut], status_code=201)
def create_staff_member(
    staff_in: StaffCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    check_school_access(staff_in.school_id, current_user)
    return ok(crud_person.create_staff_member(db, staff_in))
