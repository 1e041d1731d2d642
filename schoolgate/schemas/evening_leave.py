# schoolgate/schemas/evening_leave.py
from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from schoolgate.schemas.common import not_null


def _check_days(days: Optional[List[int]]) -> Optional[List[int]]:
    if days is None:
        return days
    for day in days:
        if not 0 <= day <= 6:
            raise ValueError(f"days_of_week values must be between 0 and 6, got {day}")
    return sorted(set(days))


class EveningLeaveCreate(BaseModel):
    school_id: int
    student_id: int
    checkpoint_id: Optional[int] = None
    start_date: date
    end_date: date
    days_of_week: List[int] = Field(min_length=1)
    authorized_return_time: time
    reason: Optional[str] = None

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, value):
        return _check_days(value)

    @model_validator(mode="after")
    def check_range(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class EveningLeaveUpdate(BaseModel):
    checkpoint_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    days_of_week: Optional[List[int]] = Field(default=None, min_length=1)
    authorized_return_time: Optional[time] = None
    reason: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("start_date", "end_date", "days_of_week", "authorized_return_time", "is_active")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, value):
        return _check_days(value)


class EveningLeaveOut(BaseModel):
    id: int
    school_id: int
    student_id: int
    student_name: Optional[str] = None
    checkpoint_id: Optional[int] = None
    start_date: date
    end_date: date
    days_of_week: List[int]
    authorized_return_time: time
    reason: Optional[str] = None
    is_active: bool

    class Config:
        from_attributes = True


class EveningReportRow(BaseModel):
    id: int
    school_id: int
    student_id: int
    student_name: Optional[str] = None
    checkpoint_id: Optional[int] = None
    start_date: date
    end_date: date
    days_of_week: List[int]
    authorized_return_time: time
    reason: Optional[str] = None
    is_active: bool
    has_returned: bool
    is_late: bool
    return_record_id: Optional[int] = None
    # School local time of the return entry
    return_time: Optional[datetime] = None
