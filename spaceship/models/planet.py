"""
Planet model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from sqlalchemy import Column, Boolean, ForeignKey, Integer


class Planet(SQLModel, table=True):
    """Planet table. Column names are camelCase to match the shared schema."""
    __tablename__ = "planets"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    is_habitable: bool = Field(
        default=False,
        sa_column=Column("isHabitable", Boolean, nullable=False, default=False)
    )
    image_id: int = Field(
        sa_column=Column("imageId", Integer, ForeignKey("images.id"), nullable=False, index=True)
    )
