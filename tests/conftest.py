from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from dog_breeds.config.settings import Settings
from dog_breeds.domain.models.breed import Breed
from dog_breeds.infrastructure.db.session import SQLAlchemyUnitOfWork, create_schema
from dog_breeds.interfaces.http.main import create_app, initialize_database


def make_breed(**overrides) -> Breed:
    data = {
        "name": "Border Collie",
        "breed_group": "Herding",
        "temperament": "Intelligent, Energetic, Responsive",
        "life_span": "12-15 years",
        "height_min_cm": 46,
        "height_max_cm": 56,
        "weight_min_kg": 14,
        "weight_max_kg": 20.5,
        "description": "The Border Collie is a working and herding dog breed.",
        "image_url": "https://example.com/border-collie.jpg",
    }
    data.update(overrides)
    return Breed.create(**data)


def breed_payload(**overrides) -> dict:
    payload = {
        "name": "Border Collie",
        "breed_group": "Herding",
        "temperament": "Intelligent, Energetic, Responsive",
        "life_span": "12-15 years",
        "height_cm": {"min": 46, "max": 56},
        "weight_kg": {"min": 14, "max": 20},
        "description": "The Border Collie is a working and herding dog breed.",
        "image_url": "https://example.com/border-collie.jpg",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "auto_create_schema": True,
            "seed_on_startup": True,
            "enable_provider_states": True,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    # ASGITransport does not run the lifespan, so bootstrap the database here
    await initialize_database(app)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def uow_factory(app) -> AsyncIterator[Callable[[], SQLAlchemyUnitOfWork]]:
    """Unit of work factory over an empty, schema-only database."""
    await create_schema(app.state.engine)

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(app.state.session_factory)

    yield factory
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_uow_factory(uow_factory) -> Callable[[], SQLAlchemyUnitOfWork]:
    async with uow_factory() as uow:
        await uow.breeds.seed_if_empty()
        await uow.commit()
    return uow_factory


@pytest.fixture()
def new_breed() -> Callable[..., Breed]:
    return make_breed


@pytest.fixture()
def breed_body() -> Callable[..., dict]:
    return breed_payload
