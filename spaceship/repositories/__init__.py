"""
Data-access layer: one repository contract and SQL implementation per resource.
"""
from spaceship.repositories.image_repository import ImageRepository, SqlImageRepository
from spaceship.repositories.planet_repository import PlanetRepository, SqlPlanetRepository
from spaceship.repositories.astronaut_repository import AstronautRepository, SqlAstronautRepository

__all__ = [
    'ImageRepository',
    'SqlImageRepository',
    'PlanetRepository',
    'SqlPlanetRepository',
    'AstronautRepository',
    'SqlAstronautRepository',
]
