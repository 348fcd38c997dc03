import enum

class BookingStatus(str, enum.Enum):
    """Closed set of booking lifecycle states."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Statuses a caller may request through a status update. Nothing moves a
# booking back to PENDING.
STATUS_UPDATE_TARGETS = frozenset(
    {
        BookingStatus.ACCEPTED,
        BookingStatus.DECLINED,
        BookingStatus.COMPLETED,
        BookingStatus.CANCELLED,
    }
)
