"""
Image schemas.
"""
from pydantic import Field, field_validator
from typing import Any, Mapping, Optional

from spaceship.schemas.base import CamelModel
from spaceship.schemas.utils import require_text


class ImageCreate(CamelModel):
    """Request schema for creating an image."""
    name: str = Field(..., description="Display name of the image")
    path: str = Field(..., description="Public path of the picture")

    @field_validator('name', 'path')
    @classmethod
    def validate_text(cls, v: str) -> str:
        return require_text(v)


class ImageUpdate(ImageCreate):
    """Request schema for replacing an image. An id in the body is ignored."""
    pass


class ImageResponse(CamelModel):
    """Image response schema."""
    id: int
    name: str
    path: str


class ImageSummary(CamelModel):
    """Image embedded in a planet. All fields are null when the reference dangles."""
    id: Optional[int] = None
    name: Optional[str] = None
    path: Optional[str] = None


def image_summary_from_row(row: Mapping[str, Any], prefix: str) -> ImageSummary:
    """Fold the `<prefix>Id`, `<prefix>Name`, `<prefix>Path` columns of a joined row."""
    return ImageSummary(
        id=row[f"{prefix}Id"],
        name=row[f"{prefix}Name"],
        path=row[f"{prefix}Path"],
    )
