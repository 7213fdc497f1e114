import logging

from fastapi import Request
from sqlalchemy import event
from sqlmodel import SQLModel, create_engine, Session

from storefront.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """One engine per process, handed to the app at startup."""

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)

        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

    def create_all(self):
        from storefront import models  # noqa: F401  registers every table

        SQLModel.metadata.create_all(self.engine)

    def session(self) -> Session:
        return Session(self.engine)

    def dispose(self):
        logger.info(f"Disposing datastore engine for {self.engine.url.render_as_string()}")
        self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_database(settings: Settings) -> Database:
    url = settings.database_url

    if url.startswith("sqlite"):
        return Database(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    return Database(
        url,
        echo=False,
        pool_pre_ping=True,      # checks dead connections
        pool_recycle=1800        # refresh every 30 min
    )


def get_session(request: Request):
    with request.app.state.database.session() as session:
        yield session
