# schoolgate/api/deps.py
from typing import Generator, Optional

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from schoolgate.core.security import decode_access_token
from schoolgate.crud import user as crud_user
from schoolgate.db.models.user import User
from schoolgate.db.session import SessionLocal

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")

    email = payload.get("sub")
    user = crud_user.get_user_by_email(db, email) if email else None
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "admin":
        raise HTTPException(status_code=403, detail="Admins only")
    return current_user


def check_school_access(school_id: Optional[int], current_user: User) -> int:
    """School is always named explicitly by the caller, then checked against the user."""
    if school_id is None:
        raise HTTPException(status_code=400, detail="school_id is required")
    if current_user.school_id != school_id:
        raise HTTPException(status_code=403, detail="No access to this school")
    return school_id


def get_school_id(
    school_id: Optional[int] = Query(None),
    current_user: User = Depends(get_current_user),
) -> int:
    return check_school_access(school_id, current_user)
