# schoolgate/crud/person.py
from typing import Dict, Iterable

from sqlalchemy import or_
from sqlalchemy.orm import Session

from schoolgate.db.models.person import Student, StaffMember


def get_student(db: Session, student_id: int):
    return db.query(Student).filter(Student.id == student_id).first()


def get_students(db: Session, school_id: int, include_inactive: bool = False):
    query = db.query(Student).filter(Student.school_id == school_id)
    if not include_inactive:
        query = query.filter(Student.is_active.is_(True))
    return query.order_by(Student.last_name, Student.first_name).all()


def search_students(db: Session, school_id: int, term: str, limit: int = 20):
    pattern = f"%{term.strip()}%"
    return (
        db.query(Student)
        .filter(
            Student.school_id == school_id,
            Student.is_active.is_(True),
            or_(
                Student.first_name.ilike(pattern),
                Student.last_name.ilike(pattern),
                Student.student_number.ilike(pattern),
            ),
        )
        .order_by(Student.last_name, Student.first_name)
        .limit(limit)
        .all()
    )


def create_student(db: Session, data):
    student = Student(**data.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def update_student(db: Session, student: Student, data):
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(student, field, value)
    db.commit()
    db.refresh(student)
    return student


def delete_student(db: Session, student: Student):
    db.delete(student)
    db.commit()


def get_staff_member(db: Session, staff_id: int):
    return db.query(StaffMember).filter(StaffMember.id == staff_id).first()


def get_staff(db: Session, school_id: int):
    return (
        db.query(StaffMember)
        .filter(StaffMember.school_id == school_id)
        .order_by(StaffMember.last_name, StaffMember.first_name)
        .all()
    )


def create_staff_member(db: Session, data):
    member = StaffMember(**data.model_dump())
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def person_exists(db: Session, school_id: int, person_type: str, person_id: int) -> bool:
    model = Student if person_type == "STUDENT" else StaffMember
    return db.query(model.id).filter(model.id == person_id, model.school_id == school_id).first() is not None


def student_names(db: Session, student_ids: Iterable[int]) -> Dict[int, str]:
    ids = set(student_ids)
    if not ids:
        return {}
    return {s.id: s.full_name for s in db.query(Student).filter(Student.id.in_(ids)).all()}


def staff_names(db: Session, staff_ids: Iterable[int]) -> Dict[int, str]:
    ids = set(staff_ids)
    if not ids:
        return {}
    return {s.id: s.full_name for s in db.query(StaffMember).filter(StaffMember.id.in_(ids)).all()}
