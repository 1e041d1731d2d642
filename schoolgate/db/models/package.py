# schoolgate/db/models/package.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship
from schoolgate.core.clock import utcnow
from schoolgate.db.base import Base


class PackageDelivery(Base):
    __tablename__ = "package_deliveries"

    id = Column(Integer, primary_key=True, index=True)
    school_id = Column(Integer, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(Text, nullable=True)
    sender = Column(String, nullable=True)
    # pending -> collected, never back
    status = Column(Enum("pending", "collected", name="package_status"), nullable=False, default="pending")
    received_at = Column(DateTime, nullable=False, default=utcnow)
    collected_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    student = relationship("Student")

    @property
    def student_name(self):
        return self.student.full_name if self.student else None
