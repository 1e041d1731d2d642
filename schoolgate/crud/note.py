from sqlalchemy.orm import Session
from schoolgate.db.models.note import StudentCheckpointNote


def get_note(db: Session, school_id: int, student_id: int):
    return db.query(StudentCheckpointNote).filter(
        StudentCheckpointNote.school_id == school_id,
        StudentCheckpointNote.student_id == student_id,
    ).first()


def upsert_note(db: Session, school_id: int, student_id: int, notes: str | None, created_by: int | None = None):
    # Find or create, one note per student
    existing = get_note(db, school_id, student_id)
    if existing:
        existing.notes = notes
    else:
        existing = StudentCheckpointNote(
            school_id=school_id,
            student_id=student_id,
            notes=notes,
            created_by=created_by,
        )
        db.add(existing)
    db.commit()
    db.refresh(existing)
    return existing
