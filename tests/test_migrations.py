from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _make_alembic_config(database_url: str) -> Config:
    """Return an Alembic config pointing at the project migrations."""
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return cfg


def test_upgrade_creates_schema_and_downgrade_drops_it(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'migrations.db'}"
    cfg = _make_alembic_config(database_url)

    command.upgrade(cfg, "head")
    engine = create_engine(database_url)
    inspector = inspect(engine)
    assert {"images", "planets", "astronauts"} <= set(inspector.get_table_names())
    planet_columns = {c["name"] for c in inspector.get_columns("planets")}
    assert planet_columns == {"id", "name", "description", "isHabitable", "imageId"}
    astronaut_columns = {c["name"] for c in inspector.get_columns("astronauts")}
    assert astronaut_columns == {"id", "firstname", "lastname", "originPlanetId"}
    engine.dispose()

    command.downgrade(cfg, "base")
    engine = create_engine(database_url)
    assert "planets" not in inspect(engine).get_table_names()
    engine.dispose()
