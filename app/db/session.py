# File: app/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: str) -> Engine:
    """
    Build an engine for ``url``.

    SQLite connections are shared across FastAPI's worker threads, and an
    in-memory SQLite database is pinned to a single connection so every
    session sees the same tables.
    """
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


engine = create_db_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ----------------------------------------------------
# DB Session Dependency
# ----------------------------------------------------
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
