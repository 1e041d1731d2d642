# schoolgate/schemas/checkpoint.py
from datetime import datetime, time
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from schoolgate.schemas.common import not_null

CheckpointMode = Literal["entry", "exit", "both"]


class CheckpointCreate(BaseModel):
    school_id: int
    name: str = Field(min_length=1)
    mode: CheckpointMode = "both"
    description: Optional[str] = None


class CheckpointUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    mode: Optional[CheckpointMode] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "mode", "is_active")
    @classmethod
    def check_not_null(cls, value):
        return not_null(value)


class AuthorizedTimeIn(BaseModel):
    day_of_week: int = Field(ge=0, le=6)  # 0=Sun, 6=Sat
    start_time: time
    end_time: time

    @model_validator(mode="after")
    def check_order(self):
        # Windows spanning midnight are not supported
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self


class AuthorizedTimesUpdate(BaseModel):
    times: List[AuthorizedTimeIn]


class AuthorizedTimeOut(BaseModel):
    id: int
    checkpoint_id: int
    day_of_week: int
    start_time: time
    end_time: time

    class Config:
        from_attributes = True


class CheckpointOut(BaseModel):
    id: int
    school_id: int
    name: str
    mode: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CheckpointDetail(CheckpointOut):
    authorized_times: List[AuthorizedTimeOut] = []
