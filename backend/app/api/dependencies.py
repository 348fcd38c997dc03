"""Dependencies shared by the API routers."""

from ..database import get_db  # noqa: F401
from .auth import get_current_user, get_optional_user  # noqa: F401
