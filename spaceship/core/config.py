from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List
import logging

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

# Project root (parent of the spaceship package)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path, override=False)
    _logger.info(f"Loaded .env file from: {env_path}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - empty means a local SQLite file
    database_url: str = ""

    # API
    api_prefix: str = ""

    # CORS
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Startup behaviour
    create_tables_on_startup: bool = True
    seed_on_startup: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL normalized for SQLAlchemy."""
        return normalize_database_url(self.database_url)


def default_sqlite_url() -> str:
    """Local SQLite file under PROJECT_ROOT/data, created by `build_engine`."""
    data_dir = PROJECT_ROOT / "data"
    return f"sqlite:///{data_dir / 'spaceship.db'}"


def normalize_database_url(url: str) -> str:
    """
    Return a URL SQLAlchemy accepts.

    Hosting providers hand out postgres:// URLs; SQLAlchemy only knows
    postgresql://. An empty URL falls back to the local SQLite file.
    """
    if not url:
        return default_sqlite_url()
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


# Create settings instance
settings = Settings()
