from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from dog_breeds.application.use_cases.breeds import seed_breeds
from dog_breeds.config.settings import Settings, get_settings
from dog_breeds.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
    create_session_factory,
)
from dog_breeds.interfaces.http.envelope import ApiResponse, success_envelope
from dog_breeds.interfaces.http.routers import breeds, provider_states
from dog_breeds.interfaces.middleware.error_handler import register_error_handlers
from dog_breeds.interfaces.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

API_NAME = "Dog Breeds API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "A REST API for managing dog breeds with CRUD operations, search and pagination"
ENDPOINTS = [
    "GET /api/breeds - Get all breeds (with pagination)",
    "GET /api/breeds/search?q=query - Search breeds",
    "GET /api/breeds/:id - Get breed by ID",
    "POST /api/breeds - Create new breed",
    "PUT /api/breeds/:id - Update breed",
    "DELETE /api/breeds/:id - Delete breed",
    "GET /health - Health check",
]


class HealthData(BaseModel):
    status: str
    timestamp: datetime


class ApiInfo(BaseModel):
    name: str
    version: str
    description: str
    endpoints: list[str]


async def initialize_database(app: FastAPI) -> None:
    settings: Settings = app.state.settings
    if settings.auto_create_schema:
        await create_schema(app.state.engine)
    if settings.seed_on_startup:
        async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
            inserted = await seed_breeds.execute(uow)
        if inserted:
            logger.info("Database seeded with %d starter breeds", inserted)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await initialize_database(app)
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            logger.info("Shutting down, releasing database engine")
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(name).setLevel(max(level, logging.INFO))
    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title=API_NAME,
        version=API_VERSION,
        description=API_DESCRIPTION,
        docs_url="/api-docs",
        openapi_url="/api-docs.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    register_error_handlers(app)

    @app.get(
        "/",
        response_model=ApiResponse[ApiInfo],
        response_model_exclude_unset=True,
        tags=["health"],
    )
    async def api_info():
        return success_envelope(
            data=ApiInfo(
                name=API_NAME,
                version=API_VERSION,
                description=API_DESCRIPTION,
                endpoints=ENDPOINTS,
            ),
            message="Welcome to the Dog Breeds API!",
        )

    @app.get(
        "/health",
        response_model=ApiResponse[HealthData],
        response_model_exclude_unset=True,
        tags=["health"],
    )
    async def health():
        return success_envelope(
            data=HealthData(status="OK", timestamp=datetime.now(timezone.utc)),
            message="Dog Breeds API is running",
        )

    app.include_router(breeds.router)
    if settings.enable_provider_states:
        app.include_router(provider_states.router)

    app.add_middleware(RequestLoggingMiddleware)
    # CORS last so it runs outermost and can answer preflight OPTIONS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "dog_breeds.interfaces.http.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


app = create_app()
