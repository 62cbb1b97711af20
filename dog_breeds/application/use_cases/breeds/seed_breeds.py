from __future__ import annotations

from dog_breeds.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork) -> int:
    inserted = await uow.breeds.seed_if_empty()
    if inserted:
        await uow.commit()
    return inserted
