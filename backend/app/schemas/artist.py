from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional, Annotated
from datetime import datetime


class ArtistProfileBase(BaseModel):
    display_name: Annotated[str, Field(min_length=1, max_length=255)]
    bio: Optional[str] = None
    location: Optional[str] = None
    hourly_rate: Optional[Annotated[int, Field(ge=0)]] = None  # cents


class ArtistProfileCreate(ArtistProfileBase):
    categories: List[int] = []


class ArtistProfileUpdate(BaseModel):
    display_name: Optional[Annotated[str, Field(min_length=1, max_length=255)]] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    categories: Optional[List[int]] = None
    hourly_rate: Optional[Annotated[int, Field(ge=0)]] = None
    portfolio_images: Optional[List[str]] = None
    is_available: Optional[bool] = None

    @field_validator("display_name", "is_available")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        """These may be omitted but not cleared."""
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class RatingSummary(BaseModel):
    average: float = 0.0
    count: int = 0


class ArtistProfileResponse(ArtistProfileBase):
    id: int
    user_id: int
    categories: List[int] = []
    portfolio_images: List[str] = []
    is_available: bool
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }

    @field_validator("categories", mode="before")
    @classmethod
    def category_ids(cls, v: Any) -> Any:
        """Accept Category rows from the ORM relationship and expose their ids."""
        if v is None:
            return []
        return [getattr(c, "id", c) for c in v]

    @field_validator("portfolio_images", mode="before")
    @classmethod
    def default_images(cls, v: Any) -> Any:
        return [] if v is None else v


class ArtistProfileDetail(ArtistProfileResponse):
    """Public artist page: profile plus rating summary."""

    rating: RatingSummary = RatingSummary()
