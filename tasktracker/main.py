import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

import tasktracker.config as cfg
from tasktracker.database import Database
from tasktracker.errors import envelope, install_error_handlers
from tasktracker.logging_setup import setup_logging
from tasktracker.routers import tasks, users

logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None) -> FastAPI:
    """Build the API. ``database_url`` overrides DATABASE_URL (used by tests)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(cfg.LOG_LEVEL)
        database = Database(database_url or cfg.DATABASE_URL)
        database.connect()
        app.state.database = database
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(title="User Tasks Management System", lifespan=lifespan)

    app.include_router(users.router)
    app.include_router(tasks.router)
    install_error_handlers(app)

    @app.get("/")
    def welcome():
        return envelope("Welcome to User Tasks Management System")

    return app


app = create_app()


def run():
    setup_logging(cfg.LOG_LEVEL)
    logger.info("listening on %s:%s", cfg.HOST, cfg.PORT)
    uvicorn.run("tasktracker.main:app", host=cfg.HOST, port=cfg.PORT)


if __name__ == "__main__":
    run()
