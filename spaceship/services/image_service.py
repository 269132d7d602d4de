"""
Image service for business logic related to images.
"""
from typing import List, Optional

from spaceship.repositories.image_repository import ImageRepository
from spaceship.schemas.image import ImageCreate, ImageResponse, ImageUpdate


class ImageService:
    def __init__(self, repository: ImageRepository):
        self.repository = repository

    def list_images(self) -> List[ImageResponse]:
        return self.repository.find_all()

    def get_image(self, image_id: int) -> Optional[ImageResponse]:
        return self.repository.find_by_id(image_id) or None

    def create_image(self, image: ImageCreate) -> Optional[ImageResponse]:
        return self.repository.create(image) or None

    def update_image(self, image_id: int, image: ImageUpdate) -> Optional[ImageResponse]:
        return self.repository.update(image_id, image) or None

    def delete_image(self, image_id: int) -> bool:
        return bool(self.repository.delete(image_id))
