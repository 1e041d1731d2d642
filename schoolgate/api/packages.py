# schoolgate/api/packages.py
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schoolgate.api.deps import check_school_access, get_current_user, get_db, get_school_id
from schoolgate.crud import package as crud_package
from schoolgate.crud import person as crud_person
from schoolgate.db.models.user import User
from schoolgate.schemas.common import Envelope, ok
from schoolgate.schemas.package import PackageCreate, PackageOut

router = APIRouter()


@router.get("/packages", response_model=Envelope[List[PackageOut]])
def list_packages(
    school_id: int = Depends(get_school_id),
    status: Optional[Literal["pending", "collected"]] = None,
    student_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    return ok(crud_package.get_packages(db, school_id, status=status, student_id=student_id))


@router.get("/packages/pending", response_model=Envelope[List[PackageOut]])
def list_pending_packages(
    school_id: int = Depends(get_school_id),
    db: Session = Depends(get_db),
):
    return ok(crud_package.get_packages(db, school_id, status="pending"))


@router.post("/packages", response_model=Envelope[PackageOut], status_code=201)
def create_package(
    package_in: PackageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    check_school_access(package_in.school_id, current_user)
    student = crud_person.get_student(db, package_in.student_id)
    if not student or student.school_id != package_in.school_id:
        raise HTTPException(status_code=400, detail="Student not found")
    return ok(crud_package.create_package(db, package_in))


@router.post("/packages/{package_id}/pickup", response_model=Envelope[PackageOut])
def pickup_package(
    package_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    package = crud_package.get_package(db, package_id)
    if not package or package.school_id != current_user.school_id:
        raise HTTPException(status_code=404, detail="Package not found")
    # collected is terminal
    if package.status == "collected":
        raise HTTPException(status_code=409, detail="Package already collected")
    return ok(crud_package.mark_collected(db, package))
