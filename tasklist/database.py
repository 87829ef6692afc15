from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel, create_engine

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task, User  # noqa: F401


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(engine) -> None:
    """Make SQLite enforce tasks.user_id -> users.id on every connection.

    SQLite ships with foreign key checks off per connection.
    """
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_foreign_keys)


def _create_engine():
    if DATABASE_URL.startswith("sqlite"):
        engine = create_engine(
            DATABASE_URL,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    else:
        # Postgres: no pooling, pre-ping stale connections
        engine = create_engine(
            DATABASE_URL,
            echo=False,
            pool_pre_ping=True,
            poolclass=NullPool,
        )
    enable_sqlite_foreign_keys(engine)
    return engine


engine = _create_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Request-scoped session for FastAPI routes."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session():
    """Session for scripts running outside a request.

    Usage:
        with get_session() as session:
            users = UserRepository(session)
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_tables(bind=None):
    """Create the users and tasks tables if missing."""
    SQLModel.metadata.create_all(bind=bind or engine)
