import logging
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from schoolgate.core.clock import utcnow
from schoolgate.db.models.package import PackageDelivery

logger = logging.getLogger(__name__)


def create_package(db: Session, data):
    package = PackageDelivery(**data.model_dump())
    db.add(package)
    db.commit()
    db.refresh(package)
    logger.info(f"[Packages] Package id={package.id} received for student {package.student_id}")
    return package


def get_packages(
    db: Session,
    school_id: int,
    status: Optional[str] = None,
    student_id: Optional[int] = None,
):
    query = (
        db.query(PackageDelivery)
        .options(joinedload(PackageDelivery.student))
        .filter(PackageDelivery.school_id == school_id)
    )
    if status:
        query = query.filter(PackageDelivery.status == status)
    if student_id:
        query = query.filter(PackageDelivery.student_id == student_id)
    return query.order_by(PackageDelivery.received_at.desc(), PackageDelivery.id.desc()).all()


def get_package(db: Session, package_id: int):
    return db.query(PackageDelivery).filter(PackageDelivery.id == package_id).first()


def mark_collected(db: Session, package: PackageDelivery):
    package.status = "collected"
    package.collected_at = utcnow()
    db.commit()
    db.refresh(package)
    logger.info(f"[Packages] Package id={package.id} collected")
    return package
