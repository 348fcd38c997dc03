from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Any, Optional
import logging

from .. import crud
from ..models.user import User
from ..models.booking_status import BookingStatus
from ..schemas.review import ReviewCreate, ReviewResponse
from .dependencies import get_db, get_current_user
from ..utils import error_response

router = APIRouter(tags=["reviews"])
logger = logging.getLogger(__name__)


@router.post(
    "/",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_review(
    *,
    db: Optional[Session] = Depends(get_db),
    review_in: ReviewCreate,
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Review a booking.
    Only the client who made the booking can review it, and only once it's completed.
    """
    booking = crud.booking.get_booking(db, review_in.booking_id)
    if not booking:
        raise error_response(
            "Booking not found",
            {"booking_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )

    if booking.client_id != current_user.id:
        raise error_response(
            "Only the client can review this booking",
            {},
            status.HTTP_403_FORBIDDEN,
        )

    if booking.status != BookingStatus.COMPLETED:
        raise error_response(
            "Can only review completed bookings",
            {"booking_id": "not_completed"},
            status.HTTP_400_BAD_REQUEST,
        )

    if review_in.artist_id is not None and review_in.artist_id != booking.artist_id:
        raise error_response(
            "Artist does not match the booking",
            {"artist_id": "mismatch"},
            status.HTTP_400_BAD_REQUEST,
        )

    # No existence pre-check: the unique index on booking_id decides.
    try:
        db_review = crud.review.create_review(db, booking, review_in)
    except IntegrityError:
        raise error_response(
            "Review already submitted for this booking",
            {"booking_id": "review_exists"},
            status.HTTP_409_CONFLICT,
        )
    logger.info("Review %s created for booking %s", db_review.id, booking.id)
    return db_review


@router.get("/artist/{artist_id}", response_model=List[ReviewResponse])
def list_reviews_for_artist(artist_id: int, db: Optional[Session] = Depends(get_db)) -> Any:
    """
    List all reviews for an artist profile, newest first.
    """
    return crud.review.get_reviews_by_artist(db, artist_id)


# Reviews are immutable: no update or delete.
