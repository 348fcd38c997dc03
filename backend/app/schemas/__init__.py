from .user import UserIdentity, UserResponse, UserTypeUpdate, TokenData
from .category import CategoryBase, CategoryResponse
from .artist import (
    ArtistProfileBase,
    ArtistProfileCreate,
    ArtistProfileUpdate,
    ArtistProfileResponse,
    ArtistProfileDetail,
    RatingSummary,
)
from .booking import BookingCreate, BookingStatusUpdate, BookingResponse
from .review import ReviewBase, ReviewCreate, ReviewResponse
from .storage import (
    ImageUpload,
    PortfolioImageDelete,
    ProfilePhotoResponse,
    PortfolioResponse,
    SuccessResponse,
)

__all__ = [
    "UserIdentity",
    "UserResponse",
    "UserTypeUpdate",
    "TokenData",
    "CategoryBase",
    "CategoryResponse",
    "ArtistProfileBase",
    "ArtistProfileCreate",
    "ArtistProfileUpdate",
    "ArtistProfileResponse",
    "ArtistProfileDetail",
    "RatingSummary",
    "BookingCreate",
    "BookingStatusUpdate",
    "BookingResponse",
    "ReviewBase",
    "ReviewCreate",
    "ReviewResponse",
    "ImageUpload",
    "PortfolioImageDelete",
    "ProfilePhotoResponse",
    "PortfolioResponse",
    "SuccessResponse",
]
