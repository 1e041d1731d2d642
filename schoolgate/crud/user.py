from sqlalchemy.orm import Session
from schoolgate.db.models.user import User
from schoolgate.core.security import get_password_hash
from schoolgate.crud.school import create_school


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def get_users_by_school(db: Session, school_id: int):
    return db.query(User).filter(User.school_id == school_id).order_by(User.id).all()


def create_user(db: Session, user_data, school_id: int):
    db_user = User(
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        role=user_data.role,
        school_id=school_id,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def register_school_admin(db: Session, data):
    """Creates the school and its first admin in one transaction."""
    school = create_school(db, data.school_name, data.timezone)
    db_user = User(
        email=data.email,
        hashed_password=get_password_hash(data.password),
        full_name=data.full_name,
        role="admin",
        school_id=school.id,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
