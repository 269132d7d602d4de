from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging

from spaceship import __version__
from spaceship.api import api_router
from spaceship.core.config import Settings, settings as default_settings
from spaceship.core.database import build_engine, init_db
from spaceship.core.exceptions import (
    SpaceshipException,
    ValidationError,
    NotFoundError,
    ConflictError,
)
from spaceship.core.logging import configure_logging
from spaceship.seeds import seed_catalog

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map every failure to a `{"error": ...}` body."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Reject malformed bodies and query parameters with 400."""
        logger.warning(
            f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(SpaceshipException)
    async def spaceship_exception_handler(request: Request, exc: SpaceshipException):
        """Handle custom application exceptions. Endpoints log these themselves."""
        if isinstance(exc, ValidationError):
            status_code = status.HTTP_400_BAD_REQUEST
        elif isinstance(exc, NotFoundError):
            status_code = status.HTTP_404_NOT_FOUND
        elif isinstance(exc, ConflictError):
            status_code = status.HTTP_409_CONFLICT
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions; the client only sees a generic message."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings
        engine: Store handle; built from settings.database_url when omitted

    Returns:
        The configured FastAPI application, with the engine on app.state.engine
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(title="Spaceship API", version=__version__)
    app.state.engine = engine if engine is not None else build_engine(settings.sqlalchemy_url)

    register_exception_handlers(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Create tables and optionally load the demo catalog."""
        if settings.create_tables_on_startup:
            init_db(app.state.engine)
        if settings.seed_on_startup:
            with Session(app.state.engine) as session:
                seed_catalog(session)

    @app.get("/")
    async def root():
        return {
            "message": "Spaceship API",
            "status": "running",
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
