from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint
from schoolgate.core.clock import utcnow
from schoolgate.db.base import Base


class StudentCheckpointNote(Base):
    __tablename__ = "student_checkpoint_notes"
    __table_args__ = (UniqueConstraint("school_id", "student_id", name="uq_note_school_student"),)

    id = Column(Integer, primary_key=True, index=True)
    school_id = Column(Integer, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
