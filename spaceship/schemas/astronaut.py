"""
Astronaut schemas.
"""
from pydantic import Field, StrictInt, field_validator
from typing import Any, Mapping

from spaceship.schemas.base import CamelModel
from spaceship.schemas.planet import PlanetSummary, planet_summary_from_row
from spaceship.schemas.utils import MAX_ID, require_text


class AstronautCreate(CamelModel):
    """Request schema for creating an astronaut."""
    firstname: str
    lastname: str
    origin_planet_id: StrictInt = Field(..., gt=0, le=MAX_ID, description="Id of an existing planet")

    @field_validator('firstname', 'lastname')
    @classmethod
    def validate_text(cls, v: str) -> str:
        return require_text(v)


class AstronautUpdate(AstronautCreate):
    """Request schema for replacing an astronaut. An id in the body is ignored."""
    pass


class AstronautResponse(CamelModel):
    """Flat astronaut, origin planet referenced by id."""
    id: int
    firstname: str
    lastname: str
    origin_planet_id: int


class AstronautDisplay(CamelModel):
    """Astronaut with its origin planet (and that planet's image) embedded."""
    id: int
    firstname: str
    lastname: str
    origin_planet: PlanetSummary


def astronaut_display_from_row(row: Mapping[str, Any]) -> AstronautDisplay:
    """Fold an astronauts LEFT JOIN planets LEFT JOIN images row into the display shape."""
    return AstronautDisplay(
        id=row["id"],
        firstname=row["firstname"],
        lastname=row["lastname"],
        origin_planet=planet_summary_from_row(row, "originPlanet"),
    )
