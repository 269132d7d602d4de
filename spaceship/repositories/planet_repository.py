"""
Planet repository.

Reads LEFT JOIN images and select the image columns under `image*` aliases,
which `planet_display_from_row` folds back into a nested `image` object.
"""
from sqlmodel import Session, select
from sqlalchemy import func
from typing import List, Optional, Protocol

from spaceship.models import Image, Planet
from spaceship.core.exceptions import ValidationError
from spaceship.repositories.base import save, remove
from spaceship.schemas.planet import (
    PlanetCreate,
    PlanetDisplay,
    PlanetResponse,
    PlanetUpdate,
    planet_display_from_row,
)


class PlanetRepository(Protocol):
    """Data-access contract for planets."""

    def find_all(self, filter_name: Optional[str] = None) -> List[PlanetDisplay]: ...

    def find_by_id(self, planet_id: int) -> Optional[PlanetDisplay]: ...

    def create(self, planet: PlanetCreate) -> Optional[PlanetResponse]: ...

    def update(self, planet_id: int, planet: PlanetUpdate) -> Optional[PlanetResponse]: ...

    def delete(self, planet_id: int) -> bool: ...


def planet_display_query():
    """planets LEFT JOIN images with aliased image columns."""
    return (
        select(
            Planet.id.label("id"),
            Planet.name.label("name"),
            Planet.description.label("description"),
            Planet.is_habitable.label("isHabitable"),
            Image.id.label("imageId"),
            Image.name.label("imageName"),
            Image.path.label("imagePath"),
        )
        .select_from(Planet)
        .outerjoin(Image, Planet.image_id == Image.id)  # type: ignore[arg-type]
    )


class SqlPlanetRepository:
    """Planet repository backed by the relational store."""

    def __init__(self, session: Session):
        self.session = session

    def find_all(self, filter_name: Optional[str] = None) -> List[PlanetDisplay]:
        query = planet_display_query()
        if filter_name:
            # Case-insensitive substring match; % and _ in the filter are literal
            query = query.where(
                func.lower(Planet.name).contains(filter_name.lower(), autoescape=True)
            )
        rows = self.session.exec(query.order_by(Planet.id)).all()
        return [planet_display_from_row(row._mapping) for row in rows]

    def find_by_id(self, planet_id: int) -> Optional[PlanetDisplay]:
        row = self.session.exec(planet_display_query().where(Planet.id == planet_id)).first()
        if row is None:
            return None
        return planet_display_from_row(row._mapping)

    def create(self, planet: PlanetCreate) -> Optional[PlanetResponse]:
        created = save(
            self.session,
            Planet(
                name=planet.name,
                description=planet.description,
                is_habitable=planet.is_habitable,
                image_id=planet.image_id,
            ),
        )
        return PlanetResponse.model_validate(created) if created else None

    def update(self, planet_id: int, planet: PlanetUpdate) -> Optional[PlanetResponse]:
        existing = self.session.get(Planet, planet_id)
        if existing is None:
            return None
        existing.name = planet.name
        existing.description = planet.description
        existing.is_habitable = planet.is_habitable
        existing.image_id = planet.image_id
        updated = save(self.session, existing)
        if updated is None:
            raise ValidationError("Failed to update planet")
        return PlanetResponse.model_validate(updated)

    def delete(self, planet_id: int) -> bool:
        return remove(self.session, Planet, planet_id)
