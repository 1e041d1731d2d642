import pytz
from pydantic import BaseModel, field_validator
from typing import Literal, Optional


class SchoolRegister(BaseModel):
    """First admin of a new school."""
    email: str
    password: str
    full_name: str
    school_name: str
    timezone: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if value not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone '{value}'")
        return value


class UserCreate(BaseModel):
    email: str
    password: str
    full_name: str
    role: Literal["admin", "staff"] = "staff"


class UserLogin(BaseModel):
    email: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str


class UserOut(BaseModel):
    id: int
    email: str
    full_name: str
    role: str
    school_id: int

    class Config:
        from_attributes = True
