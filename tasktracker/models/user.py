from sqlalchemy import Column, String
from tasktracker.models.types import UTCDateTime
from tasktracker.database import Base

# Field rules (lengths, requiredness) live in tasktracker.schemas.user.
class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    first_name = Column(String)
    last_name = Column(String)
    email = Column(String, index=True)
    password = Column(String)
    created_at = Column(UTCDateTime(), nullable=False)
