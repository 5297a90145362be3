from sqlalchemy import Column, Integer, String
from taskdesk.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False)
    # bcrypt hashes are always 60 characters
    password = Column(String(60), nullable=False)
