"""Database connection and session management."""
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from studio.config import settings
from studio.models.base import Base

# Railway/Heroku use postgres:// but SQLAlchemy 1.4+ requires postgresql://
database_url = settings.database_url
if database_url.startswith("postgres://"):
    database_url = database_url.replace("postgres://", "postgresql://", 1)

engine = create_engine(
    database_url,
    connect_args={"check_same_thread": False} if "sqlite" in database_url else {},
    poolclass=StaticPool if "sqlite" in database_url else None,
    pool_pre_ping="sqlite" not in database_url,
)


def enable_sqlite_foreign_keys(bind) -> None:
    """SQLite ignores FOREIGN KEY clauses unless each connection turns them on."""

    @event.listens_for(bind, "connect")
    def _set_pragma(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if "sqlite" in database_url:
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables."""
    Base.metadata.create_all(bind=engine)


def ping(db: Session) -> bool:
    """Return True if the database answers a trivial query."""
    db.execute(text("SELECT 1"))
    return True
