from sqlalchemy import Column, String
from tasktracker.models.types import UTCDateTime
from tasktracker.database import Base

class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(32), primary_key=True)
    title = Column(String)
    description = Column(String)
    priority = Column(String)
    time = Column(UTCDateTime())
    remarks = Column(String, nullable=True)
    status = Column(String)
    created_at = Column(UTCDateTime(), nullable=False)
    # owner id as plain text, not a foreign key
    user_id = Column(String, index=True)
