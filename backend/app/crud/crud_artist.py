from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas
from .base import storage_missing, require_storage, commit_or_rollback
from .crud_category import get_categories_by_ids


def _contains(column, value: str):
    return column.ilike(f"%{value}%")


class CRUDArtistProfile:
    def get_profile(self, db: Optional[Session], profile_id: int) -> Optional[models.ArtistProfile]:
        if storage_missing(db, "get artist profile"):
            return None
        return db.query(models.ArtistProfile).filter(models.ArtistProfile.id == profile_id).first()

    def get_profile_by_user_id(self, db: Optional[Session], user_id: int) -> Optional[models.ArtistProfile]:
        if storage_missing(db, "get artist profile"):
            return None
        return (
            db.query(models.ArtistProfile)
            .filter(models.ArtistProfile.user_id == user_id)
            .first()
        )

    def create_profile(
        self,
        db: Optional[Session],
        profile_in: schemas.ArtistProfileCreate,
        user_id: int,
        categories: List[models.Category],
    ) -> models.ArtistProfile:
        """Insert a profile; pending changes already on the session commit with it."""
        db = require_storage(db, "create artist profile")
        db_profile = models.ArtistProfile(
            user_id=user_id,
            display_name=profile_in.display_name,
            bio=profile_in.bio or None,
            location=profile_in.location or None,
            hourly_rate=profile_in.hourly_rate or None,
            portfolio_images=[],
            is_available=True,
        )
        db_profile.categories = list(categories)
        db.add(db_profile)
        commit_or_rollback(db, "create artist profile")
        db.refresh(db_profile)
        return db_profile

    def update_profile(
        self,
        db: Optional[Session],
        db_profile: models.ArtistProfile,
        profile_in: schemas.ArtistProfileUpdate,
        categories: Optional[List[models.Category]] = None,
    ) -> models.ArtistProfile:
        db = require_storage(db, "update artist profile")
        update_data = profile_in.model_dump(exclude_unset=True, exclude={"categories"})
        for key, value in update_data.items():
            setattr(db_profile, key, value)
        if categories is not None:
            db_profile.categories = list(categories)
        commit_or_rollback(db, "update artist profile")
        db.refresh(db_profile)
        return db_profile

    def set_portfolio_images(
        self, db: Optional[Session], db_profile: models.ArtistProfile, images: List[str]
    ) -> models.ArtistProfile:
        db = require_storage(db, "update portfolio")
        # Assign a new list so the JSON column registers the change
        db_profile.portfolio_images = list(images)
        commit_or_rollback(db, "update portfolio")
        db.refresh(db_profile)
        return db_profile

    def search_profiles(
        self,
        db: Optional[Session],
        category: Optional[int] = None,
        location: Optional[str] = None,
        search_term: Optional[str] = None,
    ) -> List[models.ArtistProfile]:
        """Available artists matching every supplied filter, newest first.

        ``category`` is a category id matched by set membership;
        ``location`` is a substring match; ``search_term`` matches display
        name or bio.
        """
        if storage_missing(db, "search artists"):
            return []
        query = db.query(models.ArtistProfile).filter(models.ArtistProfile.is_available.is_(True))
        if category is not None:
            query = query.filter(models.ArtistProfile.categories.any(models.Category.id == category))
        if location:
            query = query.filter(_contains(models.ArtistProfile.location, location))
        if search_term:
            query = query.filter(
                or_(
                    _contains(models.ArtistProfile.display_name, search_term),
                    _contains(models.ArtistProfile.bio, search_term),
                )
            )
        return (
            query.order_by(models.ArtistProfile.created_at.desc(), models.ArtistProfile.id.desc())
            .all()
        )

    def get_all_profiles(self, db: Optional[Session]) -> List[models.ArtistProfile]:
        if storage_missing(db, "list artists"):
            return []
        return (
            db.query(models.ArtistProfile)
            .order_by(models.ArtistProfile.created_at.desc(), models.ArtistProfile.id.desc())
            .all()
        )

    def resolve_categories(self, db: Optional[Session], category_ids: List[int]) -> List[models.Category]:
        return get_categories_by_ids(db, category_ids)

artist_profile = CRUDArtistProfile()
