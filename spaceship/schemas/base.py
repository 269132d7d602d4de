"""
Base schema: snake_case attributes, camelCase JSON.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase field names (isHabitable, originPlanet, ...)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
