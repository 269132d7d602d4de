"""
Astronaut repository.

Reads join through planets to images:
astronauts LEFT JOIN planets LEFT JOIN images. Dependency columns are aliased
`originPlanet*` and `originPlanetImage*`.
"""
from sqlmodel import Session, select
from typing import List, Optional, Protocol

from spaceship.models import Astronaut, Image, Planet
from spaceship.core.exceptions import ValidationError
from spaceship.repositories.base import save, remove
from spaceship.schemas.astronaut import (
    AstronautCreate,
    AstronautDisplay,
    AstronautResponse,
    AstronautUpdate,
    astronaut_display_from_row,
)


class AstronautRepository(Protocol):
    """Data-access contract for astronauts."""

    def find_all(self) -> List[AstronautDisplay]: ...

    def find_by_id(self, astronaut_id: int) -> Optional[AstronautDisplay]: ...

    def create(self, astronaut: AstronautCreate) -> Optional[AstronautResponse]: ...

    def update(self, astronaut_id: int, astronaut: AstronautUpdate) -> Optional[AstronautResponse]: ...

    def delete(self, astronaut_id: int) -> bool: ...


def astronaut_display_query():
    return (
        select(
            Astronaut.id.label("id"),
            Astronaut.firstname.label("firstname"),
            Astronaut.lastname.label("lastname"),
            Planet.id.label("originPlanetId"),
            Planet.name.label("originPlanetName"),
            Planet.description.label("originPlanetDescription"),
            Planet.is_habitable.label("originPlanetIsHabitable"),
            Image.id.label("originPlanetImageId"),
            Image.name.label("originPlanetImageName"),
            Image.path.label("originPlanetImagePath"),
        )
        .select_from(Astronaut)
        .outerjoin(Planet, Astronaut.origin_planet_id == Planet.id)  # type: ignore[arg-type]
        .outerjoin(Image, Planet.image_id == Image.id)  # type: ignore[arg-type]
    )


class SqlAstronautRepository:
    """Astronaut repository backed by the relational store."""

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[AstronautDisplay]:
        rows = self.session.exec(astronaut_display_query().order_by(Astronaut.id)).all()
        return [astronaut_display_from_row(row._mapping) for row in rows]

    def find_by_id(self, astronaut_id: int) -> Optional[AstronautDisplay]:
        row = self.session.exec(
            astronaut_display_query().where(Astronaut.id == astronaut_id)
        ).first()
        if row is None:
            return None
        return astronaut_display_from_row(row._mapping)

    def create(self, astronaut: AstronautCreate) -> Optional[AstronautResponse]:
        created = save(
            self.session,
            Astronaut(
                firstname=astronaut.firstname,
                lastname=astronaut.lastname,
                origin_planet_id=astronaut.origin_planet_id,
            ),
        )
        return AstronautResponse.model_validate(created) if created else None

    def update(self, astronaut_id: int, astronaut: AstronautUpdate) -> Optional[AstronautResponse]:
        existing = self.session.get(Astronaut, astronaut_id)
        if existing is None:
            return None
        existing.firstname = astronaut.firstname
        existing.lastname = astronaut.lastname
        existing.origin_planet_id = astronaut.origin_planet_id
        updated = save(self.session, existing)
        if updated is None:
            raise ValidationError("Failed to update astronaut")
        return AstronautResponse.model_validate(updated)

    def delete(self, astronaut_id: int) -> bool:
        return remove(self.session, Astronaut, astronaut_id)
