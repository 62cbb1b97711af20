from __future__ import annotations

from dog_breeds.application.interfaces.unit_of_work import UnitOfWork
from dog_breeds.application.validation import require_search_query
from dog_breeds.domain.models.breed import Breed


async def execute(uow: UnitOfWork, query: str | None) -> list[Breed]:
    term = require_search_query(query)
    return await uow.breeds.search(term)
