from __future__ import annotations

from types import SimpleNamespace

import pytest

from dog_breeds.application.errors import NotFound, ValidationError
from dog_breeds.application.use_cases.breeds import (
    create_breed,
    delete_breed,
    get_breed,
    list_breeds,
    search_breeds,
    seed_breeds,
    update_breed,
)
from dog_breeds.application.validation import PageRequest
from dog_breeds.domain.models.breed import Breed, BreedPatch


def sample_breed(**overrides) -> Breed:
    data = {
        "name": "Golden Retriever",
        "breed_group": "Sporting",
        "temperament": "Friendly, Intelligent, Devoted",
        "life_span": "10-12 years",
        "height_min_cm": 55,
        "height_max_cm": 61,
        "weight_min_kg": 25,
        "weight_max_kg": 34,
        "description": "A large-sized gun dog bred to retrieve shot waterfowl.",
    }
    data.update(overrides)
    breed = Breed.create(**data)
    breed.id = 1
    return breed


class StubRepo:
    def __init__(self, stored: Breed | None = None) -> None:
        self.stored = stored
        self.add_called = False
        self.update_called = False
        self.search_called = False
        self.list_args = None

    async def add(self, breed: Breed) -> Breed:
        self.add_called = True
        breed.id = 42
        return breed

    async def get(self, breed_id):
        return self.stored

    async def list(self, *, page, limit):
        self.list_args = (page, limit)
        return ([self.stored] if self.stored else []), 1

    async def search(self, query):
        self.search_called = True
        return [self.stored] if self.stored and query in self.stored.name else []

    async def update(self, breed_id, patch):
        self.update_called = True
        if self.stored is None:
            return None
        return self.stored.merged_with(patch)

    async def delete(self, breed_id):
        return self.stored is not None

    async def seed_if_empty(self):
        return 0 if self.stored else 3


def make_uow(repo: StubRepo):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(breeds=repo, commit=commit, rollback=rollback, commits=commits)


def create_input(**overrides) -> create_breed.CreateBreedInput:
    data = {
        "name": "Border Collie",
        "breed_group": "Herding",
        "temperament": "Intelligent",
        "life_span": "12-15 years",
        "height_min_cm": 46,
        "height_max_cm": 56,
        "weight_min_kg": 14,
        "weight_max_kg": 20,
        "description": "A working and herding dog breed.",
    }
    data.update(overrides)
    return create_breed.CreateBreedInput(**data)


async def test_create_breed_commits():
    repo = StubRepo()
    uow = make_uow(repo)
    created = await create_breed.execute(uow, create_input())
    assert repo.add_called
    assert created.id == 42
    assert uow.commits == [True]


async def test_create_rejects_inverted_height_before_storage():
    repo = StubRepo()
    uow = make_uow(repo)
    with pytest.raises(ValidationError) as excinfo:
        await create_breed.execute(uow, create_input(height_min_cm=70, height_max_cm=60))
    assert excinfo.value.message == "Height min cannot be greater than height max"
    assert not repo.add_called


async def test_create_rejects_inverted_weight_before_storage():
    repo = StubRepo()
    uow = make_uow(repo)
    with pytest.raises(ValidationError) as excinfo:
        await create_breed.execute(uow, create_input(weight_min_kg=40, weight_max_kg=30))
    assert excinfo.value.message == "Weight min cannot be greater than weight max"
    assert not repo.add_called


async def test_get_breed_missing_raises_not_found():
    uow = make_uow(StubRepo())
    with pytest.raises(NotFound) as excinfo:
        await get_breed.execute(uow, 7)
    assert excinfo.value.message == "Breed not found"


async def test_list_breeds_passes_window():
    repo = StubRepo(sample_breed())
    result = await list_breeds.execute(make_uow(repo), PageRequest(page=2, limit=5))
    assert repo.list_args == (2, 5)
    assert (result.page, result.limit, result.total) == (2, 5, 1)


async def test_search_requires_query():
    repo = StubRepo(sample_breed())
    with pytest.raises(ValidationError):
        await search_breeds.execute(make_uow(repo), "   ")
    assert not repo.search_called


async def test_search_uses_trimmed_query():
    repo = StubRepo(sample_breed())
    found = await search_breeds.execute(make_uow(repo), "  Golden  ")
    assert [b.name for b in found] == ["Golden Retriever"]


async def test_update_rejects_sent_inverted_span_before_storage():
    repo = StubRepo(sample_breed())
    patch = BreedPatch(changes={"height_min_cm": 70, "height_max_cm": 60})
    with pytest.raises(ValidationError) as excinfo:
        await update_breed.execute(make_uow(repo), 1, patch)
    assert excinfo.value.message == "Height min cannot be greater than height max"
    assert not repo.update_called


async def test_update_rejects_single_bound_that_inverts_stored_span():
    repo = StubRepo(sample_breed())
    patch = BreedPatch(changes={"weight_min_kg": 50})
    with pytest.raises(ValidationError) as excinfo:
        await update_breed.execute(make_uow(repo), 1, patch)
    assert excinfo.value.message == "Weight min cannot be greater than weight max"
    assert not repo.update_called


async def test_update_missing_breed_raises_not_found():
    repo = StubRepo()
    with pytest.raises(NotFound):
        await update_breed.execute(make_uow(repo), 1, BreedPatch(changes={"name": "Nope"}))


async def test_update_applies_patch_and_commits():
    repo = StubRepo(sample_breed())
    uow = make_uow(repo)
    updated = await update_breed.execute(uow, 1, BreedPatch(changes={"name": "Goldie"}))
    assert updated.name == "Goldie"
    assert updated.breed_group == "Sporting"
    assert uow.commits == [True]


async def test_delete_missing_breed_raises_not_found():
    uow = make_uow(StubRepo())
    with pytest.raises(NotFound):
        await delete_breed.execute(uow, 1)
    assert uow.commits == []


async def test_seed_commits_only_when_rows_inserted():
    empty_uow = make_uow(StubRepo())
    assert await seed_breeds.execute(empty_uow) == 3
    assert empty_uow.commits == [True]

    full_uow = make_uow(StubRepo(sample_breed()))
    assert await seed_breeds.execute(full_uow) == 0
    assert full_uow.commits == []
