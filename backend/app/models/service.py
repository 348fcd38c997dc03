# backend/app/models/service.py
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Text,
    Boolean,
)
from .base import BaseModel


class Service(BaseModel):
    """A bookable offering listed by an artist.

    Stored for the artist's own bookkeeping; booking requests are free-form
    and do not reference a service.
    """

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    artist_id = Column(
        Integer,
        ForeignKey("artist_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Integer, nullable=False)  # in cents
    duration_minutes = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
