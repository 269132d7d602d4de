"""
Images endpoint.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List
import logging

from spaceship.api.deps import get_image_service, get_logger
from spaceship.api.endpoints.utils import parse_id
from spaceship.core.exceptions import NotFoundError, ValidationError
from spaceship.schemas.image import ImageCreate, ImageResponse, ImageUpdate
from spaceship.services.image_service import ImageService

router = APIRouter(prefix="/images", tags=["images"])


@router.get("", response_model=List[ImageResponse])
@router.get("/", response_model=List[ImageResponse], include_in_schema=False)
async def get_images(
    service: ImageService = Depends(get_image_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Get all images."""
    images = service.list_images()
    logger.info(f"images.list: fetched {len(images)} images")
    return images


@router.get("/{image_id}", response_model=ImageResponse)
async def get_image(
    image_id: str,
    service: ImageService = Depends(get_image_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Get an image by id."""
    pk = parse_id(image_id)
    image = service.get_image(pk) if pk is not None else None
    if image is None:
        logger.warning(f"images.get: image not found: {image_id}")
        raise NotFoundError("Image not found")
    logger.info(f"images.get: fetched image {image.id}")
    return image


@router.post("", response_model=ImageResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ImageResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_image(
    request: ImageCreate,
    service: ImageService = Depends(get_image_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Create a new image."""
    image = service.create_image(request)
    if image is None:
        logger.warning(f"images.create: failed to create image {request.name!r}")
        raise ValidationError("Failed to create image")
    logger.info(f"images.create: created image {image.id}")
    return image


@router.put("/{image_id}", response_model=ImageResponse)
async def update_image(
    image_id: str,
    request: ImageUpdate,
    service: ImageService = Depends(get_image_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Replace an image. Unknown ids answer 404."""
    pk = parse_id(image_id)
    image = service.update_image(pk, request) if pk is not None else None
    if image is None:
        logger.warning(f"images.update: image not found: {image_id}")
        raise NotFoundError("Image not found")
    logger.info(f"images.update: updated image {image.id}")
    return image


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_image(
    image_id: str,
    service: ImageService = Depends(get_image_service),
    logger: logging.Logger = Depends(get_logger)
):
    """Delete an image. Fails with 409 while a planet still uses it."""
    pk = parse_id(image_id)
    deleted = service.delete_image(pk) if pk is not None else False
    if not deleted:
        logger.warning(f"images.delete: image not found: {image_id}")
        raise NotFoundError("Image not found")
    logger.info(f"images.delete: deleted image {pk}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
