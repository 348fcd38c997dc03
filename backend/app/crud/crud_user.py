from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional

from .. import models, schemas
from ..core.config import settings
from .base import storage_missing, require_storage, commit_or_rollback

# Profile fields copied from the identity provider when present in the claims
_TEXT_FIELDS = ("name", "email", "login_method")


class CRUDUser:
    def get_user(self, db: Optional[Session], user_id: int) -> Optional[models.User]:
        if storage_missing(db, "get user"):
            return None
        return db.query(models.User).filter(models.User.id == user_id).first()

    def get_user_by_open_id(self, db: Optional[Session], open_id: str) -> Optional[models.User]:
        if storage_missing(db, "get user"):
            return None
        return db.query(models.User).filter(models.User.open_id == open_id).first()

    def upsert_user(self, db: Optional[Session], identity: schemas.UserIdentity) -> models.User:
        """Insert or refresh the user identified by ``identity.open_id``.

        Only fields present in ``identity`` are written; an explicit ``None``
        clears a text field. The configured owner is promoted to admin unless
        a role is given.
        """
        if not identity.open_id:
            raise ValueError("User open_id is required for upsert")
        db = require_storage(db, "upsert user")

        provided = identity.model_fields_set
        updates: dict = {}
        for field in _TEXT_FIELDS:
            if field in provided:
                updates[field] = getattr(identity, field)
        if identity.last_signed_in is not None:
            updates["last_signed_in"] = identity.last_signed_in
        if identity.role is not None:
            updates["role"] = identity.role
        elif settings.OWNER_OPEN_ID and identity.open_id == settings.OWNER_OPEN_ID:
            updates["role"] = models.UserRole.ADMIN
        if identity.user_type is not None:
            updates["user_type"] = identity.user_type

        db_user = self.get_user_by_open_id(db, identity.open_id)
        if db_user is None:
            db_user = models.User(open_id=identity.open_id, **updates)
            if db_user.last_signed_in is None:
                db_user.last_signed_in = datetime.utcnow()
            db.add(db_user)
        else:
            if not updates:
                updates["last_signed_in"] = datetime.utcnow()
            for key, value in updates.items():
                setattr(db_user, key, value)
        commit_or_rollback(db, "upsert user")
        db.refresh(db_user)
        return db_user

    def update_user_type(
        self, db: Optional[Session], db_user: models.User, user_type: models.UserType
    ) -> models.User:
        db = require_storage(db, "update user type")
        db_user.user_type = user_type
        commit_or_rollback(db, "update user type")
        db.refresh(db_user)
        return db_user

    def update_profile_photo(
        self,
        db: Optional[Session],
        db_user: models.User,
        photo_url: Optional[str],
        photo_key: Optional[str],
    ) -> models.User:
        db = require_storage(db, "update profile photo")
        db_user.profile_photo_url = photo_url
        db_user.profile_photo_key = photo_key
        commit_or_rollback(db, "update profile photo")
        db.refresh(db_user)
        return db_user

user = CRUDUser() # Create an instance for easy import
