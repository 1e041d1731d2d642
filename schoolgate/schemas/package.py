from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class PackageCreate(BaseModel):
    school_id: int
    student_id: int
    description: Optional[str] = None
    sender: Optional[str] = None


class PackageOut(BaseModel):
    id: int
    school_id: int
    student_id: int
    student_name: Optional[str] = None
    description: Optional[str] = None
    sender: Optional[str] = None
    status: str
    received_at: datetime
    collected_at: Optional[datetime] = None

    class Config:
        from_attributes = True
