# backend/app/api/api_booking.py

import logging
from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import ORJSONResponse
from sqlalchemy.orm import Session
from typing import List, Any, Optional

from .. import crud
from ..models.user import User, UserType
from ..schemas.booking import BookingCreate, BookingStatusUpdate, BookingResponse
from .dependencies import get_db, get_current_user
from ..utils import error_response

router = APIRouter(tags=["bookings"], default_response_class=ORJSONResponse)
logger = logging.getLogger(__name__)
# ‣ Note: no prefix here.  main.py already does:
#     app.include_router(router, prefix="/api/v1/bookings", …)


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    *,
    db: Optional[Session] = Depends(get_db),
    booking_in: BookingCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Request a booking with an artist.  The caller becomes the booking's client.

    No availability check is made against the artist's schedule, and repeated
    requests create separate bookings.
    """
    artist_profile = crud.artist_profile.get_profile(db, booking_in.artist_id)
    if not artist_profile:
        raise error_response(
            "Artist not found",
            {"artist_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )

    db_booking = crud.booking.create_booking(db, booking_in, client_id=current_user.id)
    logger.info(
        "Booking %s requested by user %s for artist %s",
        db_booking.id,
        current_user.id,
        db_booking.artist_id,
    )
    return db_booking


@router.get("/my-bookings", response_model=List[BookingResponse])
def read_my_bookings(
    *,
    db: Optional[Session] = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Bookings the caller must respond to as an artist, else the ones they made.

    A caller whose account is an artist (or both) and who owns a profile
    sees the bookings addressed to that profile. Everyone else, including a
    "both" account without a profile yet, sees the bookings they requested.
    The two views are never merged.
    """
    db_user = crud.user.get_user(db, current_user.id)
    if not db_user:
        return []

    if db_user.user_type in (UserType.ARTIST, UserType.BOTH):
        profile = crud.artist_profile.get_profile_by_user_id(db, db_user.id)
        if profile:
            return crud.booking.get_bookings_by_artist(db, profile.id)

    return crud.booking.get_bookings_by_client(db, db_user.id)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(
    *,
    db: Optional[Session] = Depends(get_db),
    booking_id: int = Path(..., title="The ID of the booking to update"),
    status_update: BookingStatusUpdate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """Move a booking to accepted, declined, completed or cancelled.

    Allowed for the booking's client and for the owner of the booked artist
    profile. Any current status may move to any of the four targets.
    """
    db_booking = crud.booking.get_booking(db, booking_id)
    if not db_booking:
        raise error_response(
            "Booking not found",
            {"booking_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )

    profile = crud.artist_profile.get_profile_by_user_id(db, current_user.id)
    is_client = db_booking.client_id == current_user.id
    is_artist = profile is not None and db_booking.artist_id == profile.id
    if not (is_client or is_artist):
        raise error_response(
            "Not authorized to update this booking",
            {},
            status.HTTP_403_FORBIDDEN,
        )

    previous = db_booking.status
    db_booking = crud.booking.update_booking_status(db, db_booking, status_update.status)
    logger.info(
        "Booking %s status %s -> %s by user %s",
        db_booking.id,
        getattr(previous, "value", previous),
        db_booking.status.value,
        current_user.id,
    )
    return db_booking
