# schoolgate/db/__init__.py
# Importing schoolgate.db registers every model on Base.metadata

from schoolgate.db.base import Base
from schoolgate.db.models import (
    School,
    User,
    Student,
    StaffMember,
    Checkpoint,
    CheckpointAuthorizedTime,
    EntryExitRecord,
    EveningLeave,
    PackageDelivery,
    StudentCheckpointNote,
)

__all__ = [
    "Base",
    "School",
    "User",
    "Student",
    "StaffMember",
    "Checkpoint",
    "CheckpointAuthorizedTime",
    "EntryExitRecord",
    "EveningLeave",
    "PackageDelivery",
    "StudentCheckpointNote",
]
