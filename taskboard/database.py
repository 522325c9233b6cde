import sqlite3
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from taskboard.config.settings import settings

DATABASE_URL = settings.DATABASE_URL


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        # Sessions are handed between FastAPI's threadpool and the event loop
        return {"check_same_thread": False}
    if url.startswith("postgresql") and settings.DATABASE_SSLMODE:
        return {"sslmode": settings.DATABASE_SSLMODE}
    return {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Request-scoped session, injected into the GraphQL context
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Commit everything done inside the block, or roll all of it back"""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
