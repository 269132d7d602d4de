"""
Image repository.
"""
from sqlmodel import Session, select
from typing import List, Optional, Protocol

from spaceship.models import Image
from spaceship.core.exceptions import ValidationError
from spaceship.repositories.base import save, remove
from spaceship.schemas.image import ImageCreate, ImageResponse, ImageUpdate


class ImageRepository(Protocol):
    """Data-access contract for images. Images have no dependency, so reads are flat."""

    def find_all(self) -> List[ImageResponse]: ...

    def find_by_id(self, image_id: int) -> Optional[ImageResponse]: ...

    def create(self, image: ImageCreate) -> Optional[ImageResponse]: ...

    def update(self, image_id: int, image: ImageUpdate) -> Optional[ImageResponse]: ...

    def delete(self, image_id: int) -> bool: ...


class SqlImageRepository:
    """Image repository backed by the relational store."""

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[ImageResponse]:
        images = self.session.exec(select(Image).order_by(Image.id)).all()
        return [ImageResponse.model_validate(image) for image in images]

    def find_by_id(self, image_id: int) -> Optional[ImageResponse]:
        image = self.session.get(Image, image_id)
        if image is None:
            return None
        return ImageResponse.model_validate(image)

    def create(self, image: ImageCreate) -> Optional[ImageResponse]:
        created = save(self.session, Image(name=image.name, path=image.path))
        return ImageResponse.model_validate(created) if created else None

    def update(self, image_id: int, image: ImageUpdate) -> Optional[ImageResponse]:
        existing = self.session.get(Image, image_id)
        if existing is None:
            return None
        existing.name = image.name
        existing.path = image.path
        updated = save(self.session, existing)
        if updated is None:
            raise ValidationError("Failed to update image")
        return ImageResponse.model_validate(updated)

    def delete(self, image_id: int) -> bool:
        return remove(self.session, Image, image_id)
