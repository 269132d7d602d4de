"""
Dependency providers: session -> repository -> service, plus the request logger.

Tests swap any of these through `app.dependency_overrides`.
"""
from fastapi import Depends
from sqlmodel import Session
import logging

from spaceship.core.database import get_session
from spaceship.repositories import (
    SqlAstronautRepository,
    SqlImageRepository,
    SqlPlanetRepository,
)
from spaceship.services.astronaut_service import AstronautService
from spaceship.services.image_service import ImageService
from spaceship.services.planet_service import PlanetService


def get_logger() -> logging.Logger:
    return logging.getLogger("spaceship.api")


def get_image_service(session: Session = Depends(get_session)) -> ImageService:
    return ImageService(SqlImageRepository(session))


def get_planet_service(session: Session = Depends(get_session)) -> PlanetService:
    return PlanetService(SqlPlanetRepository(session))


def get_astronaut_service(session: Session = Depends(get_session)) -> AstronautService:
    return AstronautService(SqlAstronautRepository(session))
