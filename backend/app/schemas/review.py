from pydantic import BaseModel, Field
from typing import Optional, Annotated
from datetime import datetime


class ReviewBase(BaseModel):
  rating: Annotated[int, Field(ge=1, le=5)]
  comment: Optional[str] = None


class ReviewCreate(ReviewBase):
  """Client → artist review payload (booking-bound)."""
  booking_id: int
  # Optional cross-check; the stored value always comes from the booking
  artist_id: Optional[int] = None


class ReviewResponse(ReviewBase):
  id: int
  booking_id: int
  client_id: int
  artist_id: int
  created_at: datetime

  model_config = {"from_attributes": True}
