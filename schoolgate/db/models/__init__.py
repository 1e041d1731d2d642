from schoolgate.db.base import Base
from schoolgate.db.models.school import School
from schoolgate.db.models.user import User
from schoolgate.db.models.person import Student, StaffMember
from schoolgate.db.models.checkpoint import Checkpoint, CheckpointAuthorizedTime
from schoolgate.db.models.entry_exit import EntryExitRecord
from schoolgate.db.models.evening_leave import EveningLeave
from schoolgate.db.models.package import PackageDelivery
from schoolgate.db.models.note import StudentCheckpointNote

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
