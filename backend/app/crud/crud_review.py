from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas
from .base import storage_missing, require_storage, commit_or_rollback

class CRUDReview:
    def get_reviews_by_artist(self, db: Optional[Session], artist_id: int) -> List[models.Review]:
        if storage_missing(db, "list reviews"):
            return []
        return (
            db.query(models.Review)
            .filter(models.Review.artist_id == artist_id)
            .order_by(models.Review.created_at.desc(), models.Review.id.desc())
            .all()
        )

    def get_artist_average_rating(self, db: Optional[Session], artist_id: int) -> Optional[dict]:
        if storage_missing(db, "get artist rating"):
            return None
        avg_rating, count = (
            db.query(func.avg(models.Review.rating), func.count(models.Review.id))
            .filter(models.Review.artist_id == artist_id)
            .one()
        )
        return {
            "average": float(avg_rating) if avg_rating else 0.0,
            "count": int(count or 0),
        }

    def create_review(
        self, db: Optional[Session], db_booking: models.Booking, review_in: schemas.ReviewCreate
    ) -> models.Review:
        """Insert the review for ``db_booking``.

        The client and artist ids come from the booking itself. A second
        review for the same booking is rejected by the unique constraint on
        ``booking_id`` and surfaces as ``IntegrityError``.
        """
        db = require_storage(db, "create review")
        db_review = models.Review(
            booking_id=db_booking.id,
            client_id=db_booking.client_id,
            artist_id=db_booking.artist_id,
            rating=review_in.rating,
            comment=review_in.comment or None,
        )
        db.add(db_review)
        commit_or_rollback(db, "create review")
        db.refresh(db_review)
        return db_review

review = CRUDReview()
