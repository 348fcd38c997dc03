from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

Base = declarative_base()

# The engine is created on first use and reused for the life of the process.
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _database_url() -> str:
    return (os.getenv("DATABASE_URL") or settings.DATABASE_URL or "").strip()


def get_engine() -> Optional[Engine]:
    """Return the process-wide engine, or ``None`` when no database is configured."""
    global _engine, _SessionLocal
    if _engine is None:
        url = _database_url()
        if not url:
            return None
        connect_args = {}
        pool_kwargs = {"pool_pre_ping": True}
        if url.startswith("sqlite"):
            # SQLite uses a per-process connection; allow use across threadpool workers
            connect_args = {"check_same_thread": False}
        try:
            _engine = create_engine(url, connect_args=connect_args, **pool_kwargs)
        except Exception as exc:
            logger.warning("Failed to connect to database: %s", exc)
            _engine = None
            return None
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    return _engine


def reset_engine() -> None:
    """Dispose the cached engine so the next call re-reads configuration."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


# Dependency
def get_db():
    """Yield a session, or ``None`` when storage is not configured.

    Data-access functions treat ``None`` as "storage unavailable": reads
    return empty results, writes raise.
    """
    if get_engine() is None:
        yield None
        return
    db = _SessionLocal()
    try:
        yield db
    finally:
        db.close()

