from __future__ import annotations

from dataclasses import dataclass

from dog_breeds.application.interfaces.unit_of_work import UnitOfWork
from dog_breeds.application.validation import PageRequest
from dog_breeds.domain.models.breed import Breed


@dataclass(slots=True)
class ListBreedsResult:
    items: list[Breed]
    total: int
    page: int
    limit: int


async def execute(uow: UnitOfWork, page_request: PageRequest) -> ListBreedsResult:
    items, total = await uow.breeds.list(page=page_request.page, limit=page_request.limit)
    return ListBreedsResult(
        items=items, total=total, page=page_request.page, limit=page_request.limit
    )
