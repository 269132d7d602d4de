"""
Image model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class Image(SQLModel, table=True):
    """Image table - stores picture files referenced by planets."""
    __tablename__ = "images"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    path: str  # Public path of the picture, e.g. '/assets/mars.jpg'
