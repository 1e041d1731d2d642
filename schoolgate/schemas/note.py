from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class NoteUpsert(BaseModel):
    school_id: int
    notes: Optional[str] = None


class NoteOut(BaseModel):
    id: int
    school_id: int
    student_id: int
    notes: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True
