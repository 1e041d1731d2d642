from sqlalchemy import Column, Integer, String, Enum, ForeignKey
from schoolgate.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum("admin", "staff", name="user_role"), nullable=False)  # admin manages, staff works the desk
    full_name = Column(String, nullable=False)
    school_id = Column(Integer, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)
