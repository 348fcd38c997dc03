"""Shared storage guards for the data-access objects.

Every query object receives the session yielded by ``get_db``. When no
database is configured that session is ``None``: reads log a warning and
return an empty result, writes raise ``StorageUnavailableError``.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..utils.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


def storage_missing(db: Optional[Session], operation: str) -> bool:
    """Return True (and log) when a read cannot reach storage."""
    if db is None:
        logger.warning("Cannot %s: database not available", operation)
        return True
    return False


def require_storage(db: Optional[Session], operation: str) -> Session:
    if db is None:
        logger.error("Cannot %s: database not available", operation)
        raise StorageUnavailableError(operation)
    return db


def commit_or_rollback(db: Session, operation: str) -> None:
    """Commit the session; on failure roll back, log and re-raise."""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to %s: %s", operation, exc)
        raise
