"""
Astronaut model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from sqlalchemy import Column, ForeignKey, Integer


class Astronaut(SQLModel, table=True):
    """Astronaut table - each astronaut comes from one planet."""
    __tablename__ = "astronauts"

    id: Optional[int] = Field(default=None, primary_key=True)
    firstname: str
    lastname: str
    origin_planet_id: int = Field(
        sa_column=Column("originPlanetId", Integer, ForeignKey("planets.id"), nullable=False, index=True)
    )
