import logging

import pytz
from sqlalchemy.orm import Session

from schoolgate.core.clock import get_timezone
from schoolgate.db.models.school import School

logger = logging.getLogger(__name__)


def get_school(db: Session, school_id: int):
    return db.query(School).filter(School.id == school_id).first()


def create_school(db: Session, name: str, timezone: str | None = None):
    school = School(name=name, timezone=timezone)
    db.add(school)
    db.flush()
    return school


def school_timezone(db: Session, school_id: int):
    """pytz zone of the school, falling back to SCHOOL_TIMEZONE."""
    school = get_school(db, school_id)
    name = school.timezone if school else None
    try:
        return get_timezone(name)
    except pytz.UnknownTimeZoneError:
        # Stored before names were validated on register
        logger.warning(f"[School] Unknown timezone '{name}' for school {school_id}, using the default")
        return get_timezone(None)
