from __future__ import annotations

from dog_breeds.application.errors import NotFound
from dog_breeds.application.interfaces.unit_of_work import UnitOfWork
from dog_breeds.application.validation import ensure_breed_spans, ensure_spans_ordered
from dog_breeds.domain.models.breed import Breed, BreedPatch, Span


def _sent_span(patch: BreedPatch, low: str, high: str) -> Span | None:
    if patch.provides(low) and patch.provides(high):
        return Span(min=patch.changes[low], max=patch.changes[high])
    return None


async def execute(uow: UnitOfWork, breed_id: int, patch: BreedPatch) -> Breed:
    # Spans sent in full are checked before touching storage
    ensure_spans_ordered(
        _sent_span(patch, "height_min_cm", "height_max_cm"),
        _sent_span(patch, "weight_min_kg", "weight_max_kg"),
    )
    existing = await uow.breeds.get(breed_id)
    if not existing:
        raise NotFound("Breed not found")
    # A single bound can still invert the stored span
    ensure_breed_spans(existing.merged_with(patch))
    updated = await uow.breeds.update(breed_id, patch)
    if not updated:
        raise NotFound("Breed not found")
    await uow.commit()
    return updated
