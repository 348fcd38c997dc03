from typing import Any, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import crud
from ..models.artist_profile import ArtistProfile
from ..models.user import User
from ..schemas.storage import ImageUpload, PortfolioImageDelete, PortfolioResponse
from ..utils import error_response
from .api_user import store_image_upload
from .dependencies import get_db, get_current_user

router = APIRouter(tags=["portfolio"])


def _my_profile(db: Optional[Session], current_user: User) -> ArtistProfile:
    profile = crud.artist_profile.get_profile_by_user_id(db, current_user.id)
    if not profile:
        raise error_response("Artist profile not found", {}, status.HTTP_404_NOT_FOUND)
    return profile


@router.post("/images", response_model=PortfolioResponse, status_code=status.HTTP_201_CREATED)
def upload_portfolio_image(
    payload: ImageUpload,
    db: Optional[Session] = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Store an image and append its URL to the caller's portfolio."""
    profile = _my_profile(db, current_user)
    stored = store_image_upload("portfolio", profile.id, payload)
    images = profile.portfolio_image_list + [stored.url]
    profile = crud.artist_profile.set_portfolio_images(db, profile, images)
    return {"success": True, "url": stored.url, "images": profile.portfolio_image_list}


@router.delete("/images", response_model=PortfolioResponse)
def delete_portfolio_image(
    payload: PortfolioImageDelete,
    db: Optional[Session] = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Remove a URL from the caller's portfolio.

    The object itself stays in blob storage so existing links keep working.
    """
    profile = _my_profile(db, current_user)
    images = [url for url in profile.portfolio_image_list if url != payload.image_url]
    profile = crud.artist_profile.set_portfolio_images(db, profile, images)
    return {"success": True, "images": profile.portfolio_image_list}
