# schoolgate/api/checkpoints.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schoolgate.api.deps import check_school_access, get_current_user, get_db, get_school_id, require_admin
from schoolgate.crud import checkpoint as crud_checkpoint
from schoolgate.db.models.user import User
from schoolgate.schemas.checkpoint import (
    AuthorizedTimeOut,
    AuthorizedTimesUpdate,
    CheckpointCreate,
    CheckpointDetail,
    CheckpointOut,
    CheckpointUpdate,
)
from schoolgate.schemas.common import Envelope, ok

router = APIRouter()


def get_owned_checkpoint(db: Session, checkpoint_id: int, current_user: User):
    checkpoint = crud_checkpoint.get_checkpoint(db, checkpoint_id)
    # Another school's checkpoint looks the same as a missing one
    if not checkpoint or checkpoint.school_id != current_user.school_id:
        raise HTTPException(status_code=404, detail="Checkpoint not found")
    return checkpoint


@router.get("/checkpoints", response_model=Envelope[List[CheckpointOut]])
def list_checkpoints(
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
):
    return ok(crud_checkpoint.get_checkpoints(db, school_id))


@router.post("/checkpoints", response_model=Envelope[CheckpointOut], status_code=201)
def create_checkpoint(
    checkpoint_in: CheckpointCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    check_school_access(checkpoint_in.school_id, current_user)
    return ok(crud_checkpoint.create_checkpoint(db, checkpoint_in, created_by=current_user.id))


@router.get("/checkpoints/{checkpoint_id}", response_model=Envelope[CheckpointDetail])
def get_checkpoint(
    checkpoint_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return ok(get_owned_checkpoint(db, checkpoint_id, current_user))


@router.put("/checkpoints/{checkpoint_id}", response_model=Envelope[CheckpointOut])
def update_checkpoint(
    checkpoint_id: int,
    checkpoint_update: CheckpointUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    checkpoint = get_owned_checkpoint(db, checkpoint_id, current_user)
    return ok(crud_checkpoint.update_checkpoint(db, checkpoint, checkpoint_update))


@router.delete("/checkpoints/{checkpoint_id}", response_model=Envelope)
def delete_checkpoint(
    checkpoint_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    checkpoint = get_owned_checkpoint(db, checkpoint_id, current_user)
    crud_checkpoint.delete_checkpoint(db, checkpoint)
    return ok()


@router.get("/checkpoints/{checkpoint_id}/times", response_model=Envelope[List[AuthorizedTimeOut]])
@router.get("/checkpoints/{checkpoint_id}/authorized-times", response_model=Envelope[List[AuthorizedTimeOut]])
def get_authorized_times(
    checkpoint_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    get_owned_checkpoint(db, checkpoint_id, current_user)
    return ok(crud_checkpoint.get_authorized_times(db, checkpoint_id))


@router.put("/checkpoints/{checkpoint_id}/times", response_model=Envelope[List[AuthorizedTimeOut]])
@router.put("/checkpoints/{checkpoint_id}/authorized-times", response_model=Envelope[List[AuthorizedTimeOut]])
def set_authorized_times(
    checkpoint_id: int,
    times_in: AuthorizedTimesUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    checkpoint = get_owned_checkpoint(db, checkpoint_id, current_user)
    return ok(crud_checkpoint.set_authorized_times(db, checkpoint, times_in.times))
