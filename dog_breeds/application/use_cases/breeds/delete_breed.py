from __future__ import annotations

from dog_breeds.application.errors import NotFound
from dog_breeds.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, breed_id: int) -> None:
    deleted = await uow.breeds.delete(breed_id)
    if not deleted:
        raise NotFound("Breed not found")
    await uow.commit()
