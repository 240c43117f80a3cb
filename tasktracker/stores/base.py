import functools
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasktracker.errors import StorageError

logger = logging.getLogger(__name__)


def as_document(row, exclude=()):
    """Copy a mapped row into a plain dict, leaving out ``exclude`` columns."""
    if row is None:
        return None
    return {c.key: getattr(row, c.key) for c in row.__table__.columns if c.key not in exclude}


def storage_call(method):
    """Roll back and re-raise database failures as StorageError."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.debug("%s.%s failed", type(self).__name__, method.__name__, exc_info=True)
            raise StorageError(str(exc)) from exc

    return wrapper


class Store:
    # columns that a full overwrite never touches
    immutable = ("id", "created_at")

    def __init__(self, db: Session):
        self.db = db

    def _overwrite(self, row, record: dict):
        for column in row.__table__.columns:
            if column.key in self.immutable:
                continue
            setattr(row, column.key, record.get(column.key))
