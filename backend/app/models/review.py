from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel

class Review(BaseModel):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    # One review per booking, enforced by the database
    booking_id  = Column(Integer, ForeignKey("bookings.id"), unique=True, nullable=False, index=True)
    # Copied from the parent booking when the review is written
    client_id   = Column(Integer, ForeignKey("users.id"), nullable=False)
    artist_id   = Column(Integer, ForeignKey("artist_profiles.id"), nullable=False, index=True)

    rating      = Column(Integer, nullable=False)  # 1-5
    comment     = Column(Text, nullable=True)

    # Relationships
    #   Each Review is attached to exactly one Booking
    booking = relationship(
        "Booking",
        back_populates="review"
    )

    #   Each Review belongs to exactly one ArtistProfile
    artist = relationship(
        "ArtistProfile",
        back_populates="reviews"
    )
