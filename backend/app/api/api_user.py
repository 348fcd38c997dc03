import logging
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import crud
from ..models.user import User
from ..schemas.user import UserResponse, UserTypeUpdate
from ..schemas.storage import ImageUpload, ProfilePhotoResponse, SuccessResponse
from ..utils import error_response
from ..utils import storage as blob_storage
from .dependencies import get_db, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def store_image_upload(prefix: str, owner_id: int, upload: ImageUpload) -> blob_storage.StoredObject:
    """Store an uploaded image, translating storage failures into API errors."""
    try:
        return blob_storage.store_image(prefix, owner_id, upload.image_data, upload.mime_type)
    except blob_storage.InvalidImageData as exc:
        raise error_response(str(exc), {"image_data": "invalid"}, status.HTTP_400_BAD_REQUEST)
    except blob_storage.StorageNotConfigured as exc:
        raise error_response(str(exc), {}, status.HTTP_503_SERVICE_UNAVAILABLE)
    except (BotoCoreError, ClientError) as exc:
        logger.error("Upload of %s image for %s failed: %s", prefix, owner_id, exc)
        raise error_response("Could not upload image", {}, status.HTTP_502_BAD_GATEWAY)


def _reload_user(db: Optional[Session], current_user: User) -> User:
    db_user = crud.user.get_user(db, current_user.id)
    if db_user is None:
        raise error_response("User not found", {}, status.HTTP_404_NOT_FOUND)
    return db_user


@router.patch("/users/me/user-type", response_model=UserResponse)
def update_my_user_type(
    payload: UserTypeUpdate,
    db: Optional[Session] = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    db_user = _reload_user(db, current_user)
    return crud.user.update_user_type(db, db_user, payload.user_type)


@router.post(
    "/users/me/profile-photo",
    response_model=ProfilePhotoResponse,
    summary="Upload or replace the current user's profile photo",
)
def upload_profile_photo(
    payload: ImageUpload,
    db: Optional[Session] = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """POST /api/v1/users/me/profile-photo

    The previous photo stays in blob storage; only the user's reference to
    it is replaced.
    """
    db_user = _reload_user(db, current_user)
    stored = store_image_upload("profile-photos", db_user.id, payload)
    crud.user.update_profile_photo(db, db_user, stored.url, stored.key)
    return {"url": stored.url}


@router.delete("/users/me/profile-photo", response_model=SuccessResponse)
def delete_profile_photo(
    db: Optional[Session] = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    db_user = crud.user.get_user(db, current_user.id)
    if not db_user or not db_user.profile_photo_key:
        return {"success": False, "message": "No profile photo to delete"}

    # Only the reference is cleared; the stored object is left in place.
    crud.user.update_profile_photo(db, db_user, None, None)
    return {"success": True}
