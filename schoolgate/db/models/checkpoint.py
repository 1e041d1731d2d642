# schoolgate/db/models/checkpoint.py
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Time, Enum, ForeignKey
from sqlalchemy.orm import relationship
from schoolgate.core.clock import utcnow
from schoolgate.db.base import Base


class Checkpoint(Base):
    __tablename__ = "checkpoints"

    id = Column(Integer, primary_key=True, index=True)
    school_id = Column(Integer, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    mode = Column(Enum("entry", "exit", "both", name="checkpoint_mode"), nullable=False, default="both")
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Insertion order is kept; the evaluator sorts windows itself
    authorized_times = relationship(
        "CheckpointAuthorizedTime",
        back_populates="checkpoint",
        cascade="all, delete-orphan",
        order_by="CheckpointAuthorizedTime.id",
    )
    records = relationship("EntryExitRecord", back_populates="checkpoint", cascade="all, delete-orphan")

    def accepts(self, record_type: str) -> bool:
        if self.mode == "both":
            return True
        return self.mode == record_type.lower()


class CheckpointAuthorizedTime(Base):
    __tablename__ = "checkpoint_authorized_times"

    id = Column(Integer, primary_key=True, index=True)
    checkpoint_id = Column(Integer, ForeignKey("checkpoints.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)  # 0=Sun, 6=Sat
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    checkpoint = relationship("Checkpoint", back_populates="authorized_times")
