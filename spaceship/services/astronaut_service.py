"""
Astronaut service for business logic related to astronauts.
"""
from typing import List, Optional

from spaceship.repositories.astronaut_repository import AstronautRepository
from spaceship.schemas.astronaut import (
    AstronautCreate,
    AstronautDisplay,
    AstronautResponse,
    AstronautUpdate,
)


class AstronautService:
    def __init__(self, repository: AstronautRepository):
        self.repository = repository

    def list_astronauts(self) -> List[AstronautDisplay]:
        return self.repository.find_all()

    def get_astronaut(self, astronaut_id: int) -> Optional[AstronautDisplay]:
        return self.repository.find_by_id(astronaut_id) or None

    def create_astronaut(self, astronaut: AstronautCreate) -> Optional[AstronautResponse]:
        return self.repository.create(astronaut) or None

    def update_astronaut(
        self,
        astronaut_id: int,
        astronaut: AstronautUpdate
    ) -> Optional[AstronautResponse]:
        return self.repository.update(astronaut_id, astronaut) or None

    def delete_astronaut(self, astronaut_id: int) -> bool:
        return bool(self.repository.delete(astronaut_id))
