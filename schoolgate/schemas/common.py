# schoolgate/schemas/common.py
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Every endpoint answers {success, data?, error?}."""
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None


def ok(data=None) -> dict:
    return {"success": True, "data": data}


def fail(error: str) -> dict:
    return {"success": False, "error": error}


def not_null(value):
    """Update fields may be left out, but not cleared."""
    if value is None:
        raise ValueError("may not be null")
    return value
