from pydantic import BaseModel, Field, field_validator
from typing import Optional, Annotated
from datetime import datetime
from ..models.booking_status import BookingStatus, STATUS_UPDATE_TARGETS

# Properties to receive on item creation (from a client)
class BookingCreate(BaseModel):
    artist_id: int  # ArtistProfile id of the artist being booked
    service_description: Annotated[str, Field(min_length=1)]
    requested_date: datetime
    budget: Optional[Annotated[int, Field(gt=0)]] = None  # cents
    notes: Optional[str] = None
    # client_id is the authenticated user; status always starts PENDING


class BookingStatusUpdate(BaseModel):
    status: BookingStatus

    @field_validator("status")
    @classmethod
    def not_pending(cls, v: BookingStatus) -> BookingStatus:
        if v not in STATUS_UPDATE_TARGETS:
            raise ValueError("status must be one of accepted, declined, completed, cancelled")
        return v


# Properties to return to client
class BookingResponse(BaseModel):
    id: int
    client_id: int
    artist_id: int
    service_description: str
    requested_date: datetime
    status: BookingStatus
    budget: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
