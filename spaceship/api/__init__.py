"""
API router aggregation.
"""
from fastapi import APIRouter
from spaceship.api.endpoints import images, planets, astronauts

api_router = APIRouter()

# Each router defines its own prefix
api_router.include_router(images.router)
api_router.include_router(planets.router)
api_router.include_router(astronauts.router)
