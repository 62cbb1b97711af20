from __future__ import annotations

from dog_breeds.application.interfaces.unit_of_work import UnitOfWork


async def clear(uow: UnitOfWork, *, reset_ids: bool = False) -> None:
    await uow.breeds.clear(reset_ids=reset_ids)
    await uow.commit()


async def reseed(uow: UnitOfWork) -> int:
    """Empty the table, restart ids and insert the starter breeds again."""
    await uow.breeds.clear(reset_ids=True)
    inserted = await uow.breeds.seed_if_empty()
    await uow.commit()
    return inserted
