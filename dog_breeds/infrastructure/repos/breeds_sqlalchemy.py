from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import delete, func, or_, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dog_breeds.application.errors import DuplicateNameError, StorageError
from dog_breeds.domain.models.breed import Breed, BreedPatch, Span
from dog_breeds.domain.ports.breeds_repo import BreedsRepo
from dog_breeds.infrastructure.db.orm.breed import BreedORM
from dog_breeds.infrastructure.db.seed import seed_breeds
from dog_breeds.utils.datetime_tz import ensure_utc, utcnow

logger = logging.getLogger(__name__)

UNIQUE_NAME_MARKERS = ("dog_breeds.name", "uq_dog_breeds_name")
# Largest value SQLite stores in an INTEGER column
MAX_SQLITE_INTEGER = 2**63 - 1


def _is_duplicate_name(exc: IntegrityError) -> bool:
    detail = str(exc.orig)
    return any(marker in detail for marker in UNIQUE_NAME_MARKERS)


def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@contextmanager
def _storage_errors(action: str, *, name: str | None = None) -> Iterator[None]:
    try:
        yield
    except IntegrityError as exc:
        if name is not None and _is_duplicate_name(exc):
            logger.info("Rejected duplicate breed name %r while trying to %s", name, action)
            raise DuplicateNameError(name) from exc
        logger.exception("Integrity failure while trying to %s", action)
        raise StorageError(f"Failed to {action}") from exc
    except SQLAlchemyError as exc:
        logger.exception("Storage failure while trying to %s", action)
        raise StorageError(f"Failed to {action}") from exc


class BreedsSQLAlchemyRepository(BreedsRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedORM) -> Breed:
        return Breed(
            id=orm.id,
            name=orm.name,
            breed_group=orm.breed_group,
            temperament=orm.temperament,
            life_span=orm.life_span,
            height_cm=Span(min=orm.height_min_cm, max=orm.height_max_cm),
            weight_kg=Span(min=orm.weight_min_kg, max=orm.weight_max_kg),
            description=orm.description,
            image_url=orm.image_url,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    def _to_orm(self, breed: Breed) -> BreedORM:
        now = utcnow()
        return BreedORM(**breed.flat_values(), created_at=now, updated_at=now)

    async def add(self, breed: Breed) -> Breed:
        orm = self._to_orm(breed)
        with _storage_errors("create breed", name=breed.name):
            self.session.add(orm)
            await self.session.flush()
        return self._to_domain(orm)

    async def get(self, breed_id: int) -> Breed | None:
        if breed_id > MAX_SQLITE_INTEGER:
            return None
        with _storage_errors("load breed"):
            orm = await self.session.get(BreedORM, breed_id)
        return self._to_domain(orm) if orm else None

    async def list(self, *, page: int, limit: int) -> tuple[list[Breed], int]:
        offset = (page - 1) * limit
        if offset > MAX_SQLITE_INTEGER:
            return [], await self.count()
        stmt = select(BreedORM).order_by(BreedORM.name, BreedORM.id).limit(limit).offset(offset)
        with _storage_errors("list breeds"):
            total = await self.count()
            res = await self.session.execute(stmt)
            items = res.scalars().all()
        return [self._to_domain(x) for x in items], total

    async def search(self, query: str) -> list[Breed]:
        pattern = _like_pattern(query)
        stmt = (
            select(BreedORM)
            .where(
                or_(
                    BreedORM.name.ilike(pattern, escape="\\"),
                    BreedORM.breed_group.ilike(pattern, escape="\\"),
                    BreedORM.temperament.ilike(pattern, escape="\\"),
                )
            )
            .order_by(BreedORM.name, BreedORM.id)
        )
        with _storage_errors("search breeds"):
            res = await self.session.execute(stmt)
            items = res.scalars().all()
        return [self._to_domain(x) for x in items]

    async def count(self) -> int:
        with _storage_errors("count breeds"):
            res = await self.session.execute(select(func.count()).select_from(BreedORM))
        return int(res.scalar_one())

    async def update(self, breed_id: int, patch: BreedPatch) -> Breed | None:
        if breed_id > MAX_SQLITE_INTEGER:
            return None
        with _storage_errors("load breed"):
            orm = await self.session.get(BreedORM, breed_id)
        if orm is None:
            return None
        for field_name, value in patch.changes.items():
            setattr(orm, field_name, value)
        orm.updated_at = utcnow()
        with _storage_errors("update breed", name=orm.name):
            await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, breed_id: int) -> bool:
        if breed_id > MAX_SQLITE_INTEGER:
            return False
        stmt = delete(BreedORM).where(BreedORM.id == breed_id)
        with _storage_errors("delete breed"):
            res = await self.session.execute(stmt)
        return res.rowcount > 0

    async def clear(self, *, reset_ids: bool = False) -> None:
        with _storage_errors("clear breeds"):
            await self.session.execute(delete(BreedORM))
            if reset_ids and self.session.get_bind().dialect.name == "sqlite":
                await self.session.execute(
                    text("DELETE FROM sqlite_sequence WHERE name = :table"),
                    {"table": BreedORM.__tablename__},
                )
        logger.info("Cleared breed table (reset_ids=%s)", reset_ids)

    async def seed_if_empty(self) -> int:
        if await self.count() > 0:
            return 0
        orms = [self._to_orm(breed) for breed in seed_breeds()]
        with _storage_errors("seed breeds"):
            # one flush per row keeps ids in seed order
            for orm in orms:
                self.session.add(orm)
                await self.session.flush()
        logger.info("Seeded %d breeds", len(orms))
        return len(orms)
