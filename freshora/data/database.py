# freshora/data/database.py
"""
Database handle.

The engine and session factory live on an explicitly constructed Database
object. create_app() builds one and keeps it on app.state.db; the get_db
dependency opens one Session per request from it.
"""
from contextlib import contextmanager
from typing import Generator, Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from freshora.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def _on_sqlite_connect(dbapi_connection, connection_record):
    # SQLAlchemy emits BEGIN itself so SAVEPOINTs behave under pysqlite
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _on_sqlite_begin(conn):
    conn.exec_driver_sql("BEGIN")


class Database:
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}

        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url:
                # all connections must share the one in-memory database
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(url, **engine_kwargs)

        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _on_sqlite_connect)
            event.listen(self.engine, "begin", _on_sqlite_begin)

        self.session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
        )

    def create_all(self) -> None:
        # models must be imported so they register on Base.metadata
        import freshora.data.models  # noqa: F401

        logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on error."""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency yielding a Session from the app's Database."""
    db: Database = request.app.state.db
    session = db.session_factory()
    try:
        yield session
    finally:
        session.close()
