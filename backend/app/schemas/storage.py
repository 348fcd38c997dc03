from typing import List, Optional
from urllib.parse import urlparse
from pydantic import BaseModel, Field, field_validator


class ImageUpload(BaseModel):
    """Base64 image body, optionally as a ``data:image/...;base64,`` URL."""

    image_data: str = Field(min_length=1)
    mime_type: str = Field(pattern=r"^image/[\w.+-]+$")


class PortfolioImageDelete(BaseModel):
    image_url: str

    @field_validator("image_url")
    @classmethod
    def must_be_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("image_url must be an absolute http(s) URL")
        return v


class ProfilePhotoResponse(BaseModel):
    url: str


class PortfolioResponse(BaseModel):
    success: bool = True
    url: Optional[str] = None
    images: List[str] = []


class SuccessResponse(BaseModel):
    success: bool
    message: Optional[str] = None
