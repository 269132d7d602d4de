import pytest
from sqlmodel import Session

from spaceship.core.exceptions import ConflictError, ValidationError
from spaceship.repositories import (
    SqlAstronautRepository,
    SqlImageRepository,
    SqlPlanetRepository,
)
from spaceship.schemas.astronaut import AstronautCreate, AstronautUpdate
from spaceship.schemas.image import ImageCreate, ImageUpdate
from spaceship.schemas.planet import PlanetCreate, PlanetUpdate
from tests.factories import add_astronaut, add_image, add_planet, make_engine


def planet_payload(image_id: int, name: str = "Mars", **overrides) -> PlanetCreate:
    data = {"name": name, "description": "Red", "is_habitable": False, "image_id": image_id}
    data.update(overrides)
    return PlanetCreate(**data)


class TestImageRepository:
    def test_find_all_on_empty_table(self, session):
        assert SqlImageRepository(session).find_all() == []

    def test_create_assigns_id(self, session):
        repo = SqlImageRepository(session)
        image = repo.create(ImageCreate(name="mars.jpg", path="/img/mars.jpg"))
        assert image is not None
        assert image.id == 1
        assert repo.find_by_id(image.id).path == "/img/mars.jpg"

    def test_update_round_trip(self, session):
        repo = SqlImageRepository(session)
        image = add_image(session)
        updated = repo.update(image.id, ImageUpdate(name="red.jpg", path="/img/red.jpg"))
        assert updated.id == image.id
        found = repo.find_by_id(image.id)
        assert (found.name, found.path) == ("red.jpg", "/img/red.jpg")

    def test_update_unknown_id_returns_none(self, session):
        repo = SqlImageRepository(session)
        assert repo.update(42, ImageUpdate(name="a", path="b")) is None

    def test_create_delete_find(self, session):
        repo = SqlImageRepository(session)
        image = repo.create(ImageCreate(name="tmp.jpg", path="/img/tmp.jpg"))
        assert repo.delete(image.id) is True
        assert repo.find_by_id(image.id) is None

    def test_delete_unknown_id_returns_false(self, session):
        assert SqlImageRepository(session).delete(123) is False

    def test_delete_image_still_used_by_planet_conflicts(self, session):
        image = add_image(session)
        add_planet(session, image.id)
        with pytest.raises(ConflictError):
            SqlImageRepository(session).delete(image.id)
        assert SqlImageRepository(session).find_by_id(image.id) is not None


class TestPlanetRepository:
    def test_find_by_id_embeds_image(self, session):
        image = add_image(session)
        planet = SqlPlanetRepository(session).create(planet_payload(image.id))
        found = SqlPlanetRepository(session).find_by_id(planet.id)
        assert found.model_dump(by_alias=True) == {
            "id": planet.id,
            "name": "Mars",
            "description": "Red",
            "isHabitable": False,
            "image": {"id": image.id, "name": "mars.jpg", "path": "/img/mars.jpg"},
        }

    def test_create_returns_flat_record(self, session):
        image = add_image(session)
        created = SqlPlanetRepository(session).create(planet_payload(image.id))
        assert created.image_id == image.id
        assert created.is_habitable is False

    def test_create_with_unknown_image_returns_none(self, session):
        assert SqlPlanetRepository(session).create(planet_payload(999)) is None

    def test_find_all_filters_by_name_case_insensitively(self, session):
        image = add_image(session)
        for name in ("Earth", "New earth", "Mars", "Earthling"):
            add_planet(session, image.id, name=name)
        names = [p.name for p in SqlPlanetRepository(session).find_all(filter_name="EARTH")]
        assert names == ["Earth", "New earth", "Earthling"]

    def test_filter_treats_wildcards_literally(self, session):
        image = add_image(session)
        add_planet(session, image.id, name="Mars")
        add_planet(session, image.id, name="100% Water")
        names = [p.name for p in SqlPlanetRepository(session).find_all(filter_name="%")]
        assert names == ["100% Water"]

    def test_find_all_without_filter_is_ordered_by_id(self, session):
        image = add_image(session)
        for name in ("Zeta", "Alpha"):
            add_planet(session, image.id, name=name)
        assert [p.name for p in SqlPlanetRepository(session).find_all()] == ["Zeta", "Alpha"]

    def test_update_does_not_touch_image(self, session):
        image = add_image(session)
        other = add_image(session, name="venus.jpg", path="/img/venus.jpg")
        planet = add_planet(session, image.id)
        repo = SqlPlanetRepository(session)
        updated = repo.update(
            planet.id,
            PlanetUpdate(name="Venus", description="Hot", is_habitable=True, image_id=other.id),
        )
        assert updated.image_id == other.id
        found = repo.find_by_id(planet.id)
        assert found.name == "Venus"
        assert found.is_habitable is True
        assert found.image.name == "venus.jpg"
        assert SqlImageRepository(session).find_by_id(image.id).name == "mars.jpg"

    def test_update_with_unknown_image_raises(self, session):
        image = add_image(session)
        planet = add_planet(session, image.id)
        with pytest.raises(ValidationError):
            SqlPlanetRepository(session).update(
                planet.id,
                PlanetUpdate(name="Mars", description="Red", is_habitable=False, image_id=404),
            )

    def test_dangling_image_gives_null_nested_fields(self):
        engine = make_engine(enforce_foreign_keys=False)
        with Session(engine) as session:
            planet = add_planet(session, image_id=42)
            found = SqlPlanetRepository(session).find_by_id(planet.id)
            listed = SqlPlanetRepository(session).find_all()
        engine.dispose()
        assert found.image.model_dump() == {"id": None, "name": None, "path": None}
        assert len(listed) == 1


class TestAstronautRepository:
    def test_find_by_id_embeds_planet_and_image(self, session):
        image = add_image(session)
        planet = add_planet(session, image.id, is_habitable=True)
        astronaut = SqlAstronautRepository(session).create(
            AstronautCreate(firstname="John", lastname="Smith", origin_planet_id=planet.id)
        )
        found = SqlAstronautRepository(session).find_by_id(astronaut.id)
        assert found.model_dump(by_alias=True) == {
            "id": astronaut.id,
            "firstname": "John",
            "lastname": "Smith",
            "originPlanet": {
                "id": planet.id,
                "name": "Mars",
                "description": "Red",
                "isHabitable": True,
                "image": {"id": image.id, "name": "mars.jpg", "path": "/img/mars.jpg"},
            },
        }

    def test_find_by_id_unknown(self, session):
        assert SqlAstronautRepository(session).find_by_id(999) is None

    def test_find_all(self, session):
        image = add_image(session)
        planet = add_planet(session, image.id)
        add_astronaut(session, planet.id, firstname="John")
        add_astronaut(session, planet.id, firstname="Jane")
        astronauts = SqlAstronautRepository(session).find_all()
        assert [a.firstname for a in astronauts] == ["John", "Jane"]
        assert all(a.origin_planet.id == planet.id for a in astronauts)

    def test_create_with_unknown_planet_returns_none(self, session):
        created = SqlAstronautRepository(session).create(
            AstronautCreate(firstname="John", lastname="Smith", origin_planet_id=5)
        )
        assert created is None

    def test_update_and_delete(self, session):
        image = add_image(session)
        planet = add_planet(session, image.id)
        astronaut = add_astronaut(session, planet.id)
        repo = SqlAstronautRepository(session)
        updated = repo.update(
            astronaut.id,
            AstronautUpdate(firstname="Johnny", lastname="Smith", origin_planet_id=planet.id),
        )
        assert updated.firstname == "Johnny"
        assert repo.find_by_id(astronaut.id).firstname == "Johnny"
        assert repo.delete(astronaut.id) is True
        assert repo.find_by_id(astronaut.id) is None
        assert repo.delete(astronaut.id) is False

    def test_delete_planet_with_astronauts_conflicts(self, session):
        image = add_image(session)
        planet = add_planet(session, image.id)
        add_astronaut(session, planet.id)
        with pytest.raises(ConflictError):
            SqlPlanetRepository(session).delete(planet.id)

    def test_dangling_planet_gives_null_nested_fields(self):
        engine = make_engine(enforce_foreign_keys=False)
        with Session(engine) as session:
            astronaut = add_astronaut(session, origin_planet_id=77)
            found = SqlAstronautRepository(session).find_by_id(astronaut.id)
        engine.dispose()
        assert found.firstname == "John"
        assert found.origin_planet.id is None
        assert found.origin_planet.name is None
        assert found.origin_planet.image.id is None
