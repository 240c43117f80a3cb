from fastapi import Depends
from sqlalchemy.orm import Session

from tasktracker.database import get_db
from tasktracker.errors import ErrorCode, ServiceError
from tasktracker.stores.tasks import TaskStore
from tasktracker.stores.users import UserStore
from tasktracker.utils.ids import is_valid_id


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_task_store(db: Session = Depends(get_db)) -> TaskStore:
    return TaskStore(db)


def require_valid_id(value, kind: str):
    """Decline with invalid_id before any store call is made."""
    if not is_valid_id(value):
        raise ServiceError(ErrorCode.INVALID_ID, f"Invalid {kind} id")
