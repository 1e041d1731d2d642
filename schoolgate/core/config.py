# schoolgate/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SECRET_KEY: str = "your-super-secret-jwt-key-change-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    DATABASE_URL: str = "sqlite:///./schoolgate.db"

    # Used when a school has no timezone of its own
    SCHOOL_TIMEZONE: str = "UTC"

    # None: any event after a closed window is "late", however long after
    LATE_GRACE_MINUTES: Optional[int] = None

    # Entries from this local time on, after an EXIT the same day, count as
    # evening returns
    EVENING_RETURN_WINDOW_START: str = "16:00"

    RECORDS_DEFAULT_LIMIT: int = 200

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

# Created once
settings = Settings()
