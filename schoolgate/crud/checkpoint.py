# schoolgate/crud/checkpoint.py
import logging
from typing import List

from sqlalchemy.orm import Session

from schoolgate.db.models.checkpoint import Checkpoint, CheckpointAuthorizedTime
from schoolgate.db.models.evening_leave import EveningLeave

logger = logging.getLogger(__name__)


def get_checkpoints(db: Session, school_id: int):
    return db.query(Checkpoint).filter(Checkpoint.school_id == school_id).order_by(Checkpoint.name).all()


def get_checkpoint(db: Session, checkpoint_id: int):
    return db.query(Checkpoint).filter(Checkpoint.id == checkpoint_id).first()


def create_checkpoint(db: Session, data, created_by: int | None = None):
    checkpoint = Checkpoint(**data.model_dump(), created_by=created_by)
    db.add(checkpoint)
    db.commit()
    db.refresh(checkpoint)
    logger.info(f"[Checkpoints] Created checkpoint id={checkpoint.id} '{checkpoint.name}' ({checkpoint.mode})")
    return checkpoint


def update_checkpoint(db: Session, checkpoint: Checkpoint, data):
    # Only the fields the caller actually sent
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(checkpoint, field, value)
    db.commit()
    db.refresh(checkpoint)
    return checkpoint


def delete_checkpoint(db: Session, checkpoint: Checkpoint):
    """Removes the checkpoint with its windows and records; scoped leaves become unscoped."""
    db.query(EveningLeave).filter(EveningLeave.checkpoint_id == checkpoint.id).update(
        {EveningLeave.checkpoint_id: None}, synchronize_session=False
    )
    db.delete(checkpoint)
    db.commit()
    logger.info(f"[Checkpoints] Deleted checkpoint id={checkpoint.id}")


def get_authorized_times(db: Session, checkpoint_id: int):
    return (
        db.query(CheckpointAuthorizedTime)
        .filter(CheckpointAuthorizedTime.checkpoint_id == checkpoint_id)
        .order_by(CheckpointAuthorizedTime.day_of_week, CheckpointAuthorizedTime.start_time)
        .all()
    )


def set_authorized_times(db: Session, checkpoint: Checkpoint, times: List) -> list:
    """Replaces the whole window set of a checkpoint."""
    db.query(CheckpointAuthorizedTime).filter(
        CheckpointAuthorizedTime.checkpoint_id == checkpoint.id
    ).delete(synchronize_session=False)

    for t in times:
        db.add(CheckpointAuthorizedTime(
            checkpoint_id=checkpoint.id,
            day_of_week=t.day_of_week,
            start_time=t.start_time,
            end_time=t.end_time,
        ))
    db.commit()
    db.expire(checkpoint, ["authorized_times"])
    logger.info(f"[Checkpoints] Checkpoint id={checkpoint.id} now has {len(times)} authorized time(s)")
    return get_authorized_times(db, checkpoint.id)
