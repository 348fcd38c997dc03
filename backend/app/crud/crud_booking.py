from sqlalchemy.orm import Session
from typing import List, Optional

from .. import models, schemas
from ..models.booking_status import BookingStatus
from .base import storage_missing, require_storage, commit_or_rollback


class CRUDBooking:
    def get_booking(self, db: Optional[Session], booking_id: int) -> Optional[models.Booking]:
        if storage_missing(db, "get booking"):
            return None
        return db.query(models.Booking).filter(models.Booking.id == booking_id).first()

    def get_bookings_by_client(self, db: Optional[Session], client_id: int) -> List[models.Booking]:
        if storage_missing(db, "list client bookings"):
            return []
        return (
            db.query(models.Booking)
            .filter(models.Booking.client_id == client_id)
            .order_by(models.Booking.created_at.desc(), models.Booking.id.desc())
            .all()
        )

    def get_bookings_by_artist(self, db: Optional[Session], artist_id: int) -> List[models.Booking]:
        if storage_missing(db, "list artist bookings"):
            return []
        return (
            db.query(models.Booking)
            .filter(models.Booking.artist_id == artist_id)
            .order_by(models.Booking.created_at.desc(), models.Booking.id.desc())
            .all()
        )

    def create_booking(
        self, db: Optional[Session], booking_in: schemas.BookingCreate, client_id: int
    ) -> models.Booking:
        db = require_storage(db, "create booking")
        db_booking = models.Booking(
            client_id=client_id,
            artist_id=booking_in.artist_id,
            service_description=booking_in.service_description,
            requested_date=booking_in.requested_date,
            budget=booking_in.budget or None,
            notes=booking_in.notes or None,
            status=BookingStatus.PENDING,  # every request starts pending
        )
        db.add(db_booking)
        commit_or_rollback(db, "create booking")
        db.refresh(db_booking)
        return db_booking

    def update_booking_status(
        self, db: Optional[Session], db_booking: models.Booking, status: BookingStatus
    ) -> models.Booking:
        db = require_storage(db, "update booking status")
        db_booking.status = status
        commit_or_rollback(db, "update booking status")
        db.refresh(db_booking)
        return db_booking

booking = CRUDBooking()
