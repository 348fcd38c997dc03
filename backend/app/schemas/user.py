# backend/app/schemas/user.py

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from ..models.user import UserType, UserRole


class UserIdentity(BaseModel):
    """Claims handed over by the identity provider at sign-in."""

    open_id: str = Field(min_length=1, max_length=64)
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Optional[UserRole] = None
    user_type: Optional[UserType] = None
    last_signed_in: Optional[datetime] = None


class UserResponse(BaseModel):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: UserRole
    user_type: UserType
    profile_photo_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime

    model_config = {
        "from_attributes": True
    }


class UserTypeUpdate(BaseModel):
    user_type: UserType


# TokenData for extracting "sub" (open_id) from JWT
class TokenData(BaseModel):
    open_id: Optional[str] = None
