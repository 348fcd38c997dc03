# backend/app/api/api_artist.py

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import crud
from ..models.category import Category
from ..models.user import User, UserType
from ..schemas.artist import (
    ArtistProfileCreate,
    ArtistProfileDetail,
    ArtistProfileResponse,
    ArtistProfileUpdate,
    RatingSummary,
)
from .dependencies import get_db, get_current_user
from ..utils import error_response

router = APIRouter(tags=["artists"])
logger = logging.getLogger(__name__)


def _resolve_categories(db: Optional[Session], category_ids: List[int]) -> List[Category]:
    """Map ids to Category rows, rejecting ids that do not exist."""
    categories = crud.artist_profile.resolve_categories(db, category_ids)
    missing = sorted(set(category_ids) - {c.id for c in categories})
    if missing:
        raise error_response(
            f"Unknown category ids: {missing}",
            {"categories": "not_found"},
            status.HTTP_400_BAD_REQUEST,
        )
    return categories


@router.post("/", response_model=ArtistProfileResponse, status_code=status.HTTP_201_CREATED)
def create_artist_profile(
    *,
    db: Optional[Session] = Depends(get_db),
    profile_in: ArtistProfileCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Become an artist: create the caller's profile.

    A client account is switched to ``artist`` in the same commit as the
    profile insert; ``artist`` and ``both`` accounts keep their type.
    """
    categories = _resolve_categories(db, profile_in.categories)

    db_user = crud.user.get_user(db, current_user.id)
    if db_user and db_user.user_type == UserType.CLIENT:
        db_user.user_type = UserType.ARTIST

    try:
        profile = crud.artist_profile.create_profile(db, profile_in, current_user.id, categories)
    except IntegrityError:
        raise error_response(
            "Artist profile already exists",
            {"user_id": "profile_exists"},
            status.HTTP_409_CONFLICT,
        )
    logger.info("User %s created artist profile %s", current_user.id, profile.id)
    return profile


@router.patch("/me", response_model=ArtistProfileResponse)
def update_my_artist_profile(
    *,
    db: Optional[Session] = Depends(get_db),
    profile_in: ArtistProfileUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    profile = crud.artist_profile.get_profile_by_user_id(db, current_user.id)
    if not profile:
        raise error_response(
            "Artist profile not found",
            {},
            status.HTTP_404_NOT_FOUND,
        )

    categories = None
    if profile_in.categories is not None:
        categories = _resolve_categories(db, profile_in.categories)
    return crud.artist_profile.update_profile(db, profile, profile_in, categories=categories)


@router.get("/me", response_model=Optional[ArtistProfileResponse])
def read_my_artist_profile(
    *,
    db: Optional[Session] = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """The caller's artist profile, or ``null`` if they have none."""
    return crud.artist_profile.get_profile_by_user_id(db, current_user.id)


@router.get("/search", response_model=List[ArtistProfileResponse])
def search_artists(
    *,
    db: Optional[Session] = Depends(get_db),
    category: Optional[int] = Query(None, description="Category id"),
    location: Optional[str] = Query(None),
    search_term: Optional[str] = Query(None, description="Matched against name and bio"),
) -> Any:
    """Available artists matching all given filters, newest first."""
    return crud.artist_profile.search_profiles(
        db,
        category=category,
        location=location,
        search_term=search_term,
    )


@router.get("/", response_model=List[ArtistProfileResponse])
def list_artists(db: Optional[Session] = Depends(get_db)) -> Any:
    return crud.artist_profile.get_all_profiles(db)


@router.get("/{artist_id}", response_model=ArtistProfileDetail)
def read_artist(artist_id: int, db: Optional[Session] = Depends(get_db)) -> Any:
    profile = crud.artist_profile.get_profile(db, artist_id)
    if not profile:
        raise error_response(
            "Artist not found",
            {"artist_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )

    rating = crud.review.get_artist_average_rating(db, artist_id) or {"average": 0.0, "count": 0}
    detail = ArtistProfileDetail.model_validate(profile)
    detail.rating = RatingSummary(**rating)
    return detail
