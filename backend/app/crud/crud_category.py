from sqlalchemy.orm import Session
from typing import Iterable, Optional

from .. import models
from .base import storage_missing


def get_categories(db: Optional[Session]) -> list[models.Category]:
    if storage_missing(db, "list categories"):
        return []
    return db.query(models.Category).order_by(models.Category.name).all()


def get_category_by_slug(db: Optional[Session], slug: str) -> Optional[models.Category]:
    if storage_missing(db, "get category"):
        return None
    return db.query(models.Category).filter(models.Category.slug == slug).first()


def get_categories_by_ids(db: Optional[Session], category_ids: Iterable[int]) -> list[models.Category]:
    ids = sorted(set(category_ids))
    if not ids or storage_missing(db, "get categories"):
        return []
    return (
        db.query(models.Category)
        .filter(models.Category.id.in_(ids))
        .order_by(models.Category.id)
        .all()
    )

