# schoolgate/api/students.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from schoolgate.api.deps import check_school_access, get_current_user, get_db, get_school_id
from schoolgate.crud import note as crud_note
from schoolgate.crud import person as crud_person
from schoolgate.db.models.user import User
from schoolgate.schemas.common import Envelope, ok
from schoolgate.schemas.note import NoteOut, NoteUpsert
from schoolgate.schemas.person import StudentOut

router = APIRouter()


def get_school_student(db: Session, school_id: int, student_id: int):
    student = crud_person.get_student(db, student_id)
    if not student or student.school_id != school_id:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.get("/students/search", response_model=Envelope[List[StudentOut]])
def search_students(
    q: str = Query(..., min_length=1, description="Name or student number"),
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
):
    return ok(crud_person.search_students(db, school_id, q))


@router.get("/students/{student_id}/notes", response_model=Envelope[Optional[NoteOut]])
def get_student_notes(
    student_id: int,
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
):
    get_school_student(db, school_id, student_id)
    return ok(crud_note.get_note(db, school_id, student_id))


@router.put("/students/{student_id}/notes", response_model=Envelope[NoteOut])
def upsert_student_notes(
    student_id: int,
    note_in: NoteUpsert,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    check_school_access(note_in.school_id, current_user)
    get_school_student(db, note_in.school_id, student_id)
    return ok(crud_note.upsert_note(db, note_in.school_id, student_id, note_in.notes, created_by=current_user.id))
