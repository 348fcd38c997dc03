# backend/app/main.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

# Routers under app/api/
from .api import (
    api_artist,
    api_booking,
    api_category,
    api_portfolio,
    api_review,
    api_user,
    auth,
)
from .core.config import settings
from .core.observability import setup_logging
from .database import get_engine
from .db_utils import create_tables, seed_categories
from .utils.errors import StorageUnavailableError

# Configure logging before creating any loggers
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Artist Marketplace API", default_response_class=ORJSONResponse)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("CORS origins set to: %s", settings.CORS_ORIGINS)


@app.on_event("startup")
def bootstrap_database() -> None:
    """Create tables and seed categories when a database is configured."""
    engine = get_engine()
    if engine is None:
        logger.warning("DATABASE_URL is not set; running without storage (reads return empty results)")
        return
    create_tables(engine)
    seed_categories(engine)
    logger.info("startup.bootstrap.done dialect=%s", engine.dialect.name)


@app.get("/healthz", tags=["health"])
def healthz():
    return {"status": "ok", "database": get_engine() is not None}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors with details and log them for debugging."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(errors)},
    )


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    logger.error("Storage unavailable at %s: %s", request.url.path, exc)
    return ORJSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": {"message": str(exc), "field_errors": {}}},
    )


api_prefix = settings.API_V1_STR  # usually something like "/api/v1"


# ─── AUTH ROUTES (no version prefix) ────────────────────────────────────────────────
app.include_router(auth.router, prefix="/auth", tags=["auth"])

# ─── USER ROUTES (under /api/v1/users) ──────────────────────────────────────────────
app.include_router(api_user.router, prefix=f"{api_prefix}", tags=["users"])

# ─── CATEGORY ROUTES (under /api/v1/categories) ─────────────────────────────────────
app.include_router(
    api_category.router,
    prefix=f"{api_prefix}/categories",
    tags=["categories"],
)

# ─── ARTIST ROUTES (under /api/v1/artists) ──────────────────────────────────────────
app.include_router(api_artist.router, prefix=f"{api_prefix}/artists", tags=["artists"])

# ─── BOOKING ROUTES (under /api/v1/bookings) ────────────────────────────────────────
app.include_router(
    api_booking.router, prefix=f"{api_prefix}/bookings", tags=["bookings"]
)

# ─── REVIEW ROUTES (under /api/v1/reviews) ──────────────────────────────────────────
app.include_router(api_review.router, prefix=f"{api_prefix}/reviews", tags=["reviews"])

# ─── PORTFOLIO ROUTES (under /api/v1/portfolio) ─────────────────────────────────────
app.include_router(api_portfolio.router, prefix=f"{api_prefix}/portfolio", tags=["portfolio"])
