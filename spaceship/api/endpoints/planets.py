"""
Planets endpoint.
"""
from fastapi import APIRouter, Depends, Query, Response, status
from typing import List, Optional
import logging

from spaceship.api.deps import get_logger, get_planet_service
from spaceship.api.endpoints.utils import parse_id
from spaceship.core.exceptions import NotFoundError, ValidationError
from spaceship.schemas.planet import PlanetCreate, PlanetDisplay, PlanetResponse, PlanetUpdate
from spaceship.services.planet_service import PlanetService

router = APIRouter(prefix="/planets", tags=["planets"])


@router.get("", response_model=List[PlanetDisplay])
@router.get("/", response_model=List[PlanetDisplay], include_in_schema=False)
async def get_planets(
    filter_name: Optional[str] = Query(None, alias="filterName"),
    service: PlanetService = Depends(get_planet_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Get all planets with their image, optionally filtered by a case-insensitive name fragment."""
    planets = service.list_planets(filter_name=filter_name)
    logger.info(f"planets.list: fetched {len(planets)} planets (filterName={filter_name!r})")
    return planets


@router.get("/{planet_id}", response_model=PlanetDisplay)
async def get_planet(
    planet_id: str,
    service: PlanetService = Depends(get_planet_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Get a planet by ID, with its image embedded."""
    pk = parse_id(planet_id)
    planet = service.get_planet(pk) if pk is not None else None
    if planet is None:
        logger.warning(f"planets.get: planet not found: {planet_id}")
        raise NotFoundError("Planet not found")
    logger.info(f"planets.get: fetched planet {planet.id}")
    return planet


@router.post("", response_model=PlanetResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PlanetResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_planet(
    request: PlanetCreate,
    service: PlanetService = Depends(get_planet_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Create a planet. The image must already exist."""
    planet = service.create_planet(request)
    if planet is None:
        logger.warning(f"planets.create: failed to create planet {request.name!r}")
        raise ValidationError("Failed to create planet")
    logger.info(f"planets.create: created planet {planet.id}")
    return planet


@router.put("/{planet_id}", response_model=PlanetResponse)
async def update_planet(
    planet_id: str,
    request: PlanetUpdate,
    service: PlanetService = Depends(get_planet_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Replace a planet's fields. The image embedded in reads is not touched."""
    pk = parse_id(planet_id)
    planet = service.update_planet(pk, request) if pk is not None else None
    if planet is None:
        logger.warning(f"planets.update: planet not found: {planet_id}")
        raise NotFoundError("Planet not found")
    logger.info(f"planets.update: updated planet {planet.id}")
    return planet


@router.delete("/{planet_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_planet(
    planet_id: str,
    service: PlanetService = Depends(get_planet_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Delete a planet by ID."""
    pk = parse_id(planet_id)
    deleted = service.delete_planet(pk) if pk is not None else False
    if not deleted:
        logger.warning(f"planets.delete: planet not found: {planet_id}")
        raise NotFoundError("Planet not found")
    logger.info(f"planets.delete: deleted planet {pk}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
