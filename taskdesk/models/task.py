from sqlalchemy import Column, Integer, String, ForeignKey, Text
from taskdesk.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    userid = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=True)
    priority = Column(String, nullable=True)
    taskdetails = Column(Text, nullable=True)
