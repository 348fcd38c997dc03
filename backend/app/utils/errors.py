from typing import Dict, Optional
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


class StorageUnavailableError(RuntimeError):
    """Raised by a data-access write when no database is configured."""

    def __init__(self, operation: str):
        super().__init__(f"Database not available: cannot {operation}")
        self.operation = operation


def error_response(
    message: str,
    field_errors: Optional[Dict[str, str]] = None,
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    field_errors = field_errors or {}
    logger.error("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)
