# schoolgate/schemas/person.py
from pydantic import BaseModel, field_validator
from typing import Optional

from schoolgate.schemas.common import not_null


class StudentCreate(BaseModel):
    school_id: int
    first_name: str
    last_name: str
    student_number: Optional[str] = None


class StudentUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    student_number: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("first_name", "last_name", "is_active")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class StudentOut(BaseModel):
    id: int
    school_id: int
    first_name: str
    last_name: str
    full_name: str
    student_number: Optional[str] = None
    is_active: bool

    class Config:
        from_attributes = True


class StaffCreate(BaseModel):
    school_id: int
    first_name: str
    last_name: str
    designation: Optional[str] = None


class StaffOut(BaseModel):
    id: int
    school_id: int
    first_name: str
    last_name: str
    full_name: str
    designation: Optional[str] = None
    is_active: bool

    class Config:
        from_attributes = True
