# schoolgate/db/models/evening_leave.py
from sqlalchemy import Column, Integer, Text, Boolean, Date, DateTime, Time, JSON, ForeignKey
from sqlalchemy.orm import relationship
from schoolgate.core.clock import utcnow
from schoolgate.db.base import Base


class EveningLeave(Base):
    __tablename__ = "evening_leaves"

    id = Column(Integer, primary_key=True, index=True)
    school_id = Column(Integer, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    # NULL means the leave is valid at any checkpoint
    checkpoint_id = Column(Integer, ForeignKey("checkpoints.id", ondelete="SET NULL"), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    days_of_week = Column(JSON, nullable=False, default=list)  # e.g. [1, 3] for Mon/Wed
    authorized_return_time = Column(Time, nullable=False)
    reason = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    student = relationship("Student")

    @property
    def student_name(self):
        return self.student.full_name if self.student else None
