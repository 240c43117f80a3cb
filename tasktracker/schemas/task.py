from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

# free text: non-blank, at most 255 characters
Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class UserRef(BaseModel):
    # identifiers are format-checked by the handler so it can decline
    # with invalid_id before touching the store
    user_id: str


class TaskRef(UserRef):
    task_id: str


class TaskCreate(UserRef):
    title: Text
    description: Text
    priority: Text
    time: datetime
    status: Text


class TaskUpdate(TaskRef):
    """Full replacement; an omitted ``remarks`` is cleared."""

    title: Text
    description: Text
    priority: Text
    time: datetime
    status: Text
    remarks: Optional[Text] = None


class TaskRemarks(TaskRef):
    remarks: Text


class TaskOut(BaseModel):
    task_id: str = Field(validation_alias="id")
    user_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    time: Optional[datetime] = None
    remarks: Optional[str] = None
    status: Optional[str] = None
    created_at: datetime
