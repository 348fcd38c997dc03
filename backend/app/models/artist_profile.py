# backend/app/models/artist_profile.py

from sqlalchemy import (
    Column,
    String,
    Text,
    ForeignKey,
    JSON,
    Integer,
    Boolean,
    Table,
)
from sqlalchemy.orm import relationship

from ..database import Base
from .base import BaseModel


# Many-to-many link between artist profiles and the categories they work in.
artist_profile_categories = Table(
    "artist_profile_categories",
    Base.metadata,
    Column(
        "artist_profile_id",
        Integer,
        ForeignKey("artist_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class ArtistProfile(BaseModel):
    """ORM model representing an artist's public profile."""

    __tablename__ = "artist_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    display_name = Column(String(255), nullable=False, index=True)
    bio = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    # Ordered list of image URLs
    portfolio_images = Column(JSON(none_as_null=True), nullable=True)
    hourly_rate = Column(Integer, nullable=True)  # in cents
    is_available = Column(Boolean, nullable=False, default=True)

    # Relationships
    user = relationship("User", back_populates="artist_profile")
    categories = relationship(
        "Category",
        secondary=artist_profile_categories,
        order_by="Category.id",
        lazy="selectin",
    )
    bookings = relationship("Booking", back_populates="artist")
    reviews = relationship("Review", back_populates="artist")

    @property
    def portfolio_image_list(self) -> list[str]:
        return list(self.portfolio_images or [])
