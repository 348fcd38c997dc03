from .crud_user import user
from .crud_artist import artist_profile
from .crud_booking import booking
from .crud_review import review
from . import crud_category

# Usage: `crud.booking.get_booking(db, booking_id)`
