"""
Models package - imports all table models so they register with SQLModel.
"""
from spaceship.models.image import Image
from spaceship.models.planet import Planet
from spaceship.models.astronaut import Astronaut

__all__ = [
    'Image',
    'Planet',
    'Astronaut',
]
