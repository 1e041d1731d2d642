# schoolgate/schemas/entry_exit.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

PersonType = Literal["STUDENT", "STAFF"]
RecordType = Literal["ENTRY", "EXIT"]
EntryStatus = Literal["authorized", "late", "unauthorized"]


class RecordCreate(BaseModel):
    school_id: int
    checkpoint_id: int
    person_id: int
    person_type: PersonType
    record_type: RecordType
    description: Optional[str] = None
    # Back-dated entry; naive values are read as school local time
    recorded_at: Optional[datetime] = None


class BulkRecordCreate(BaseModel):
    school_id: int
    checkpoint_id: int
    person_ids: List[int] = Field(min_length=1)
    person_type: PersonType
    record_type: RecordType
    description: Optional[str] = None


class RecordOut(BaseModel):
    id: int
    school_id: int
    checkpoint_id: int
    person_id: int
    person_type: PersonType
    record_type: RecordType
    status: EntryStatus
    description: Optional[str] = None
    recorded_at: datetime
    created_at: datetime
    checkpoint_name: Optional[str] = None
    person_name: Optional[str] = None

    class Config:
        from_attributes = True


class EntryExitStats(BaseModel):
    entries: int
    exits: int
    inside: int
    packages: int
