from __future__ import annotations

import pytest

from dog_breeds.domain.models.breed import Breed, BreedPatch, Span


def make() -> Breed:
    return Breed.create(
        name="Beagle",
        breed_group="Hound",
        temperament="Curious, Merry",
        life_span="12-15 years",
        height_min_cm=33,
        height_max_cm=41,
        weight_min_kg=9,
        weight_max_kg=11,
        description="A small scent hound.",
        image_url="https://example.com/beagle.jpg",
    )


def test_merge_keeps_omitted_fields():
    breed = make()
    merged = breed.merged_with(BreedPatch(changes={"temperament": "Gentle"}))
    assert merged.temperament == "Gentle"
    assert merged.name == "Beagle"
    assert merged.image_url == "https://example.com/beagle.jpg"
    # source breed is untouched
    assert breed.temperament == "Curious, Merry"


def test_merge_updates_single_span_bound():
    merged = make().merged_with(BreedPatch(changes={"height_max_cm": 45}))
    assert merged.height_cm == Span(min=33, max=45)
    assert merged.weight_kg == Span(min=9, max=11)


def test_explicit_null_clears_image_url():
    patch = BreedPatch(changes={"image_url": None})
    assert patch.provides("image_url")
    assert make().merged_with(patch).image_url is None


def test_empty_patch_changes_nothing():
    breed = make()
    patch = BreedPatch()
    assert patch.is_empty()
    assert breed.merged_with(patch) == breed


def test_patch_rejects_unknown_fields():
    with pytest.raises(ValueError):
        BreedPatch(changes={"id": 5})


def test_span_ordering():
    assert Span(min=1, max=1).is_ordered()
    assert not Span(min=2, max=1).is_ordered()
