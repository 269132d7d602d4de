"""
Astronauts endpoint.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
import logging

from spaceship.api.deps import get_astronaut_service, get_logger
from spaceship.api.endpoints.utils import parse_id
from spaceship.core.exceptions import NotFoundError, ValidationError
from spaceship.schemas.astronaut import (
    AstronautCreate,
    AstronautDisplay,
    AstronautResponse,
    AstronautUpdate,
)
from spaceship.services.astronaut_service import AstronautService

router = APIRouter(prefix="/astronauts", tags=["astronauts"])


@router.get("", response_model=List[AstronautDisplay])
@router.get("/", response_model=List[AstronautDisplay], include_in_schema=False)
async def get_astronauts(
    service: AstronautService = Depends(get_astronaut_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Get all astronauts with their origin planet and its image."""
    astronauts = service.list_astronauts()
    logger.info(f"astronauts.list: fetched {len(astronauts)} astronauts")
    return astronauts


@router.get("/{astronaut_id}", response_model=AstronautDisplay)
async def get_astronaut(
    astronaut_id: str,
    service: AstronautService = Depends(get_astronaut_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Get an astronaut by ID."""
    pk = parse_id(astronaut_id)
    astronaut = service.get_astronaut(pk) if pk is not None else None
    if astronaut is None:
        logger.warning(f"astronauts.get: astronaut not found: {astronaut_id}")
        raise NotFoundError("Astronaut not found")
    logger.info(f"astronauts.get: fetched astronaut {astronaut.id}")
    return astronaut


@router.post("", response_model=AstronautResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=AstronautResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_astronaut(
    request: AstronautCreate,
    service: AstronautService = Depends(get_astronaut_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Create an astronaut. The origin planet must already exist."""
    astronaut = service.create_astronaut(request)
    if astronaut is None:
        logger.warning(
            f"astronauts.create: failed to create astronaut {request.firstname} {request.lastname}"
        )
        raise ValidationError("Failed to create astronaut")
    logger.info(f"astronauts.create: created astronaut {astronaut.id}")
    return astronaut


@router.put("/{astronaut_id}", response_model=AstronautResponse)
async def update_astronaut(
    astronaut_id: str,
    request: AstronautUpdate,
    service: AstronautService = Depends(get_astronaut_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Replace an astronaut's fields."""
    pk = parse_id(astronaut_id)
    astronaut = service.update_astronaut(pk, request) if pk is not None else None
    if astronaut is None:
        logger.warning(f"astronauts.update: astronaut not found: {astronaut_id}")
        raise NotFoundError("Astronaut not found")
    logger.info(f"astronauts.update: updated astronaut {astronaut.id}")
    return astronaut


@router.delete("/{astronaut_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_astronaut(
    astronaut_id: str,
    service: AstronautService = Depends(get_astronaut_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Delete an astronaut by ID."""
    pk = parse_id(astronaut_id)
    deleted = service.delete_astronaut(pk) if pk is not None else False
    if not deleted:
        logger.warning(f"astronauts.delete: astronaut not found: {astronaut_id}")
        raise NotFoundError("Astronaut not found")
    logger.info(f"astronauts.delete: deleted astronaut {pk}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
