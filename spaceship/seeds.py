"""
Demo catalog: five images, five planets, four astronauts.

Usage:
    python -m spaceship.seeds [--reset]
"""
from sqlalchemy import delete
from sqlmodel import Session, select
import argparse
import logging

from spaceship.models import Astronaut, Image, Planet

logger = logging.getLogger(__name__)

IMAGES = [
    {"name": "Donut Factory Image", "path": "/assets/donut_factory.jpg"},
    {"name": "Duck Invaders Image", "path": "/assets/duck_invaders.jpg"},
    {"name": "Raccoon from Asgard Image", "path": "/assets/raccoon_asgards.jpg"},
    {"name": "Schizo Cats Image", "path": "/assets/schizo_cats.jpg"},
    {"name": "No Where Image", "path": "/assets/no_where.jpg"},
]

# Each planet uses the image at the same position
PLANETS = [
    {"name": "Donut Factory", "description": "Forte en calories", "is_habitable": True},
    {"name": "Duck Invaders", "description": "La danse ici est une religion", "is_habitable": True},
    {"name": "Raccoon from Asgard", "description": "Espiegle mais pas trop", "is_habitable": True},
    {"name": "Schizo Cats", "description": "Non leur planete n'est pas une pelote", "is_habitable": True},
    {"name": "No Where", "description": "No where", "is_habitable": False},
]

# (firstname, lastname, index into PLANETS)
ASTRONAUTS = [
    ("John", "Smith", 0),
    ("Jane", "Doe", 1),
    ("Bob", "Johnson", 2),
    ("Alice", "Williams", 3),
]


def clear_catalog(session: Session) -> None:
    """Delete every row, in reverse order of dependencies."""
    session.exec(delete(Astronaut))  # type: ignore[call-overload]
    session.exec(delete(Planet))  # type: ignore[call-overload]
    session.exec(delete(Image))  # type: ignore[call-overload]
    session.commit()
    logger.info("Cleared astronauts, planets and images")


def seed_catalog(session: Session, reset: bool = False) -> bool:
    """
    Insert the demo catalog.

    Args:
        session: Database session
        reset: Delete existing rows first

    Returns:
        True if rows were inserted, False if the catalog already had images
    """
    if reset:
        clear_catalog(session)
    elif session.exec(select(Image)).first() is not None:
        logger.info("Catalog already seeded, skipping")
        return False

    images = [Image(**data) for data in IMAGES]
    session.add_all(images)
    session.flush()  # assign image ids

    planets = [
        Planet(image_id=image.id, **data)
        for data, image in zip(PLANETS, images)
    ]
    session.add_all(planets)
    session.flush()

    session.add_all([
        Astronaut(firstname=firstname, lastname=lastname, origin_planet_id=planets[index].id)
        for firstname, lastname, index in ASTRONAUTS
    ])
    session.commit()

    logger.info(
        f"Seeded {len(images)} images, {len(planets)} planets, {len(ASTRONAUTS)} astronauts"
    )
    return True


def main() -> None:
    from spaceship.core.config import settings
    from spaceship.core.database import build_engine, init_db
    from spaceship.core.logging import configure_logging

    parser = argparse.ArgumentParser(description="Load the demo catalog.")
    parser.add_argument("--reset", action="store_true", help="delete existing rows first")
    args = parser.parse_args()

    configure_logging(settings.log_level)
    engine = build_engine(settings.sqlalchemy_url)
    init_db(engine)
    with Session(engine) as session:
        seed_catalog(session, reset=args.reset)


if __name__ == "__main__":
    main()
