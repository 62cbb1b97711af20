from __future__ import annotations

from dataclasses import dataclass

from dog_breeds.application.interfaces.unit_of_work import UnitOfWork
from dog_breeds.application.validation import ensure_breed_spans
from dog_breeds.domain.models.breed import Breed


@dataclass(slots=True)
class CreateBreedInput:
    name: str
    breed_group: str
    temperament: str
    life_span: str
    height_min_cm: int
    height_max_cm: int
    weight_min_kg: float
    weight_max_kg: float
    description: str
    image_url: str | None = None


async def execute(uow: UnitOfWork, payload: CreateBreedInput) -> Breed:
    breed = Breed.create(
        name=payload.name,
        breed_group=payload.breed_group,
        temperament=payload.temperament,
        life_span=payload.life_span,
        height_min_cm=payload.height_min_cm,
        height_max_cm=payload.height_max_cm,
        weight_min_kg=payload.weight_min_kg,
        weight_max_kg=payload.weight_max_kg,
        description=payload.description,
        image_url=payload.image_url,
    )
    ensure_breed_spans(breed)
    created = await uow.breeds.add(breed)
    await uow.commit()
    return created
