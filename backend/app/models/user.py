# backend/app/models/user.py

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from .base import BaseModel
from .types import CaseInsensitiveEnum
import enum

class UserType(str, enum.Enum):
    """Which side(s) of the marketplace a user acts on."""

    CLIENT = "client"
    ARTIST = "artist"
    BOTH = "both"


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    __tablename__ = "users"

    id             = Column(Integer, primary_key=True, index=True)
    # Subject issued by the identity provider; the stable login key
    open_id        = Column(String(64), unique=True, index=True, nullable=False)
    name           = Column(Text, nullable=True)
    email          = Column(String(320), unique=True, nullable=True)
    login_method   = Column(String(64), nullable=True)
    role           = Column(CaseInsensitiveEnum(UserRole, name="userrole"), nullable=False, default=UserRole.USER)
    user_type      = Column(CaseInsensitiveEnum(UserType, name="usertype"), nullable=False, default=UserType.CLIENT)
    profile_photo_url = Column(Text, nullable=True)
    # Blob-storage key of the current photo, kept for later cleanup
    profile_photo_key = Column(String(512), nullable=True)
    last_signed_in = Column(DateTime, nullable=False, default=datetime.utcnow)

    # ↔–↔ If this user offers services, they get exactly one profile here:
    artist_profile = relationship(
        "ArtistProfile",
        back_populates="user",
        uselist=False,
    )

    # ↔–↔ All bookings where this user is the client
    bookings_as_client = relationship(
        "Booking",
        foreign_keys="Booking.client_id",
        back_populates="client",
    )
