import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.engine import Engine

from .database import Base

logger = logging.getLogger(__name__)


# Canonical list of categories that should exist in the database.
DEFAULT_CATEGORIES = [
    {
        "name": "Painting & Drawing",
        "slug": "painting-drawing",
        "description": "Custom paintings, portraits, murals, and drawings",
    },
    {
        "name": "Photography",
        "slug": "photography",
        "description": "Professional photography services for events, portraits, and more",
    },
    {
        "name": "Music & Performance",
        "slug": "music-performance",
        "description": "Live music, DJ services, and performance art",
    },
    {
        "name": "Crafts & Handmade",
        "slug": "crafts-handmade",
        "description": "Handcrafted items, pottery, jewelry, and custom creations",
    },
    {
        "name": "Digital Art & Design",
        "slug": "digital-art-design",
        "description": "Graphic design, illustration, and digital artwork",
    },
    {
        "name": "Sculpture & 3D Art",
        "slug": "sculpture-3d",
        "description": "Sculptures, installations, and three-dimensional artwork",
    },
    {
        "name": "Writing & Poetry",
        "slug": "writing-poetry",
        "description": "Creative writing, poetry, and literary services",
    },
    {
        "name": "Videography & Film",
        "slug": "videography-film",
        "description": "Video production, editing, and cinematography",
    },
]


def create_tables(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    from . import models  # noqa: F401  (register every mapped table)

    Base.metadata.create_all(engine)


def seed_categories(engine: Engine) -> int:
    """Insert the canonical categories that are missing; return how many were added.

    Existing rows (matched by slug) are never modified, so running this on
    every startup is safe.
    """
    from .models.category import Category

    table = Category.__table__
    added = 0
    with engine.begin() as conn:
        existing = {row.slug for row in conn.execute(select(table.c.slug))}
        for category in DEFAULT_CATEGORIES:
            if category["slug"] in existing:
                continue
            now = datetime.utcnow()
            conn.execute(table.insert().values(**category, created_at=now, updated_at=now))
            added += 1
    if added:
        logger.info("Seeded %s categories", added)
    return added
