# schoolgate/db/models/entry_exit.py
from sqlalchemy import Column, Integer, Text, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from schoolgate.core.clock import utcnow
from schoolgate.db.base import Base


class EntryExitRecord(Base):
    __tablename__ = "entry_exit_records"

    id = Column(Integer, primary_key=True, index=True)
    school_id = Column(Integer, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)
    checkpoint_id = Column(Integer, ForeignKey("checkpoints.id", ondelete="CASCADE"), nullable=False, index=True)

    # students.id or staff.id depending on person_type
    person_id = Column(Integer, nullable=False, index=True)
    person_type = Column(Enum("STUDENT", "STAFF", name="person_type"), nullable=False)
    record_type = Column(Enum("ENTRY", "EXIT", name="record_type"), nullable=False)

    # Snapshot taken at creation; never recomputed when windows change
    status = Column(
        Enum("authorized", "late", "unauthorized", name="entry_status"),
        nullable=False,
        default="authorized",
    )
    description = Column(Text, nullable=True)
    recorded_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    checkpoint = relationship("Checkpoint", back_populates="records")

    @property
    def checkpoint_name(self):
        return self.checkpoint.name if self.checkpoint else None
