import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, url: str):
        self.url = url
        self.engine = None
        self._sessionmaker = None

    def connect(self):
        # Only apply sqlite-specific connect_args when using sqlite
        connect_args = {"check_same_thread": False} if self.url.startswith("sqlite") else {}
        self.engine = create_engine(self.url, connect_args=connect_args, pool_pre_ping=True)
        self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        # register tables on Base before create_all
        from tasktracker.models import task, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("connected to %s", self.engine.url.render_as_string(hide_password=True))

    def dispose(self):
        if self.engine is not None:
            self.engine.dispose()
            logger.info("database connection closed")
        self.engine = None
        self._sessionmaker = None

    def session(self):
        if self._sessionmaker is None:
            raise RuntimeError("Database.connect() has not been called")
        return self._sessionmaker()


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
