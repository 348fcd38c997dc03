# backend/app/models/booking.py

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from .base import BaseModel
from .booking_status import BookingStatus
from .types import CaseInsensitiveEnum

class Booking(BaseModel):
    __tablename__ = "bookings"

    id          = Column(Integer, primary_key=True, index=True)
    client_id   = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # ArtistProfile.id, not the artist's user id
    artist_id   = Column(Integer, ForeignKey("artist_profiles.id"), nullable=False, index=True)
    service_description = Column(Text, nullable=False)
    requested_date = Column(DateTime, nullable=False)
    status      = Column(
        CaseInsensitiveEnum(BookingStatus, name="bookingstatus"),
        default=BookingStatus.PENDING,
        nullable=False,
        index=True,
    )
    budget      = Column(Integer, nullable=True)  # in cents
    notes       = Column(Text, nullable=True)

    # Relationships
    artist = relationship("ArtistProfile", back_populates="bookings")
    client = relationship("User", foreign_keys=[client_id], back_populates="bookings_as_client")
    review = relationship("Review", back_populates="booking", uselist=False)
