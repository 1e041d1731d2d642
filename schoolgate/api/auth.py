from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from schoolgate.api.deps import get_db, get_current_user
from schoolgate.core.security import verify_password, create_access_token
from schoolgate.crud import user as crud_user
from schoolgate.db.models.user import User
from schoolgate.schemas.common import Envelope, ok
from schoolgate.schemas.user import SchoolRegister, UserLogin, Token, UserOut

router = APIRouter()


@router.post("/register", response_model=Envelope[Token], status_code=201)
def register(data: SchoolRegister, db: Session = Depends(get_db)):
    if crud_user.get_user_by_email(db, data.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = crud_user.register_school_admin(db, data)
    access_token = create_access_token(data={"sub": user.email})
    return ok({"access_token": access_token, "token_type": "bearer"})


@router.post("/login", response_model=Envelope[Token])
def login(form: UserLogin, db: Session = Depends(get_db)):
    user = crud_user.get_user_by_email(db, form.email)
    if not user or not verify_password(form.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    access_token = create_access_token(data={"sub": user.email})
    return ok({"access_token": access_token, "token_type": "bearer"})


@router.get("/me", response_model=Envelope[UserOut])
def me(current_user: User = Depends(get_current_user)):
    return ok(current_user)
