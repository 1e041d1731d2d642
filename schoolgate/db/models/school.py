from sqlalchemy import Column, Integer, String
from schoolgate.db.base import Base


class School(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    timezone = Column(String, nullable=True)  # pytz name, e.g. "Asia/Karachi"
