"""Design aggregate root.

Designs are user-submitted images that the community votes on.
"""

from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

from pydantic import Field, field_validator

from gallery.domain.model.common import DomainModel
from gallery.domain.value import DesignId, UserId


class Design(DomainModel):
    """Design aggregate root.

    Business rules:
    - Title is non-blank (surrounding whitespace is stripped)
    - Image URL is an absolute http(s) URI produced by the image host
    - Score is the signed sum of vote weights; it is only changed by the
      vote engine and may be negative when dislikes are enabled
    - Owner fields are copied from the submitting principal
    """

    id: DesignId
    title: str = Field(min_length=1, max_length=200)
    image_url: str
    score: int = 0
    owner_id: UserId
    owner_display_name: str = Field(min_length=1, max_length=255)
    owner_avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: object) -> object:
        """Strip whitespace so blank titles fail the length check."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        """Validate image URL is an absolute http(s) URI."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Image URL must be an absolute http(s) URI")
        return v
