from __future__ import annotations

from abc import ABC, abstractmethod

from dog_breeds.domain.models.breed import Breed, BreedPatch


class BreedsRepo(ABC):
    @abstractmethod
    async def add(self, breed: Breed) -> Breed: ...

    @abstractmethod
    async def get(self, breed_id: int) -> Breed | None: ...

    @abstractmethod
    async def list(self, *, page: int, limit: int) -> tuple[list[Breed], int]: ...

    @abstractmethod
    async def search(self, query: str) -> list[Breed]: ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def update(self, breed_id: int, patch: BreedPatch) -> Breed | None: ...

    @abstractmethod
    async def delete(self, breed_id: int) -> bool: ...

    @abstractmethod
    async def clear(self, *, reset_ids: bool = False) -> None: ...

    @abstractmethod
    async def seed_if_empty(self) -> int: ...
