"""
Planet service for business logic related to planets.
"""
from typing import List, Optional

from spaceship.repositories.planet_repository import PlanetRepository
from spaceship.schemas.planet import PlanetCreate, PlanetDisplay, PlanetResponse, PlanetUpdate


class PlanetService:
    """
    Planet operations on top of a PlanetRepository.

    There are no business rules beyond the repository's: absent results are
    normalized to None, and delete always answers with a bool.
    """

    def __init__(self, repository: PlanetRepository):
        self.repository = repository

    def list_planets(self, filter_name: Optional[str] = None) -> List[PlanetDisplay]:
        return self.repository.find_all(filter_name=filter_name)

    def get_planet(self, planet_id: int) -> Optional[PlanetDisplay]:
        return self.repository.find_by_id(planet_id) or None

    def create_planet(self, planet: PlanetCreate) -> Optional[PlanetResponse]:
        return self.repository.create(planet) or None

    def update_planet(self, planet_id: int, planet: PlanetUpdate) -> Optional[PlanetResponse]:
        return self.repository.update(planet_id, planet) or None

    def delete_planet(self, planet_id: int) -> bool:
        return bool(self.repository.delete(planet_id))
