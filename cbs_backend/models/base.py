"""
Database engine, session management, and base model.

Every model inherits from Base. Every request gets a session
from get_db().
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from cbs_backend.config import get_settings

settings = get_settings()


def build_engine(url: str):
    """
    Create the engine for the given URL.

    Server databases get a bounded connection pool: at most
    DB_POOL_SIZE + DB_MAX_OVERFLOW connections, and a request
    waits up to DB_POOL_TIMEOUT seconds for a free one.
    SQLite keeps SQLAlchemy's default pool.
    """
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )


# --- Engine ---
engine = build_engine(settings.DATABASE_URL)

# --- Session Factory ---
# autocommit=False: handlers decide when to commit, so a
# multi-row write (account + companion row) is all-or-nothing.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally guarantees the session goes back to the
    pool even when the endpoint raises.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
