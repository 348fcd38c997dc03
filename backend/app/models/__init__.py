from .user import User, UserType, UserRole
from .artist_profile import ArtistProfile, artist_profile_categories
from .category import Category
from .booking import Booking
from .booking_status import BookingStatus, STATUS_UPDATE_TARGETS
from .review import Review
from .service import Service
from .availability import AvailabilityWindow, SlotLock, ArtistSettings, BlackoutDate

__all__ = [
    "User",
    "UserType",
    "UserRole",
    "ArtistProfile",
    "artist_profile_categories",
    "Category",
    "Booking",
    "BookingStatus",
    "STATUS_UPDATE_TARGETS",
    "Review",
    "Service",
    "AvailabilityWindow",
    "SlotLock",
    "ArtistSettings",
    "BlackoutDate",
]
