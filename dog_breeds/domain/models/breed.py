from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Mapping

PATCHABLE_FIELDS: tuple[str, ...] = (
    "name",
    "breed_group",
    "temperament",
    "life_span",
    "height_min_cm",
    "height_max_cm",
    "weight_min_kg",
    "weight_max_kg",
    "description",
    "image_url",
)


@dataclass(frozen=True, slots=True)
class Span:
    """Inclusive numeric range such as a height or weight span."""

    min: float
    max: float

    def is_ordered(self) -> bool:
        return self.min <= self.max


@dataclass(slots=True)
class Breed:
    name: str
    breed_group: str
    temperament: str
    life_span: str
    height_cm: Span
    weight_kg: Span
    description: str
    image_url: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        *,
        name: str,
        breed_group: str,
        temperament: str,
        life_span: str,
        height_min_cm: int,
        height_max_cm: int,
        weight_min_kg: float,
        weight_max_kg: float,
        description: str,
        image_url: str | None = None,
    ) -> Breed:
        return cls(
            name=name,
            breed_group=breed_group,
            temperament=temperament,
            life_span=life_span,
            height_cm=Span(min=height_min_cm, max=height_max_cm),
            weight_kg=Span(min=weight_min_kg, max=weight_max_kg),
            description=description,
            image_url=image_url,
        )

    def flat_values(self) -> dict[str, Any]:
        """Column-shaped values, keyed like PATCHABLE_FIELDS."""
        return {
            "name": self.name,
            "breed_group": self.breed_group,
            "temperament": self.temperament,
            "life_span": self.life_span,
            "height_min_cm": self.height_cm.min,
            "height_max_cm": self.height_cm.max,
            "weight_min_kg": self.weight_kg.min,
            "weight_max_kg": self.weight_kg.max,
            "description": self.description,
            "image_url": self.image_url,
        }

    def merged_with(self, patch: BreedPatch) -> Breed:
        """Return a copy with every field present in ``patch`` overwritten.

        Fields the patch does not carry keep their current value. A field that
        is present with ``None`` (only allowed for ``image_url``) is cleared.
        """
        values = self.flat_values()
        values.update(patch.changes)
        return replace(
            self,
            name=values["name"],
            breed_group=values["breed_group"],
            temperament=values["temperament"],
            life_span=values["life_span"],
            height_cm=Span(min=values["height_min_cm"], max=values["height_max_cm"]),
            weight_kg=Span(min=values["weight_min_kg"], max=values["weight_max_kg"]),
            description=values["description"],
            image_url=values["image_url"],
        )


@dataclass(frozen=True, slots=True)
class BreedPatch:
    """Partial update with explicit field presence.

    Only keys in ``changes`` are applied; a key mapped to ``None`` means the
    field was sent as null, which is different from the key being absent.
    """

    changes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = set(self.changes) - set(PATCHABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown breed fields: {', '.join(sorted(unknown))}")

    def provides(self, field_name: str) -> bool:
        return field_name in self.changes

    def is_empty(self) -> bool:
        return not self.changes
