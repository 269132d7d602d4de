"""
Planet schemas.
"""
from pydantic import Field, StrictBool, StrictInt, field_validator
from typing import Any, Mapping, Optional

from spaceship.schemas.base import CamelModel
from spaceship.schemas.image import ImageSummary, image_summary_from_row
from spaceship.schemas.utils import MAX_ID, require_text


class PlanetCreate(CamelModel):
    """Request schema for creating a planet."""
    name: str
    description: str
    is_habitable: StrictBool
    image_id: StrictInt = Field(..., gt=0, le=MAX_ID, description="Id of an existing image")

    @field_validator('name', 'description')
    @classmethod
    def validate_text(cls, v: str) -> str:
        return require_text(v)


class PlanetUpdate(PlanetCreate):
    """Request schema for replacing a planet. An id in the body is ignored."""
    pass


class PlanetResponse(CamelModel):
    """Flat planet, image referenced by id."""
    id: int
    name: str
    description: str
    is_habitable: bool
    image_id: int


class PlanetDisplay(CamelModel):
    """Planet with its image embedded in place of imageId."""
    id: int
    name: str
    description: str
    is_habitable: bool
    image: ImageSummary


class PlanetSummary(CamelModel):
    """Planet embedded in an astronaut. Fields are null when the reference dangles."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_habitable: Optional[bool] = None
    image: ImageSummary


def planet_display_from_row(row: Mapping[str, Any]) -> PlanetDisplay:
    """Fold a planets LEFT JOIN images row into the display shape."""
    return PlanetDisplay(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        is_habitable=row["isHabitable"],
        image=image_summary_from_row(row, "image"),
    )


def planet_summary_from_row(row: Mapping[str, Any], prefix: str) -> PlanetSummary:
    """Fold the `<prefix>*` columns (and `<prefix>Image*`) of a joined row."""
    is_habitable = row[f"{prefix}IsHabitable"]
    return PlanetSummary(
        id=row[f"{prefix}Id"],
        name=row[f"{prefix}Name"],
        description=row[f"{prefix}Description"],
        is_habitable=bool(is_habitable) if is_habitable is not None else None,
        image=image_summary_from_row(row, f"{prefix}Image"),
    )
