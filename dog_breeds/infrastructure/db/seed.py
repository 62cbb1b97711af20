from __future__ import annotations

from dog_breeds.domain.models.breed import Breed

# Inserted in this order, so a fresh table gives Golden Retriever id 1.
SEED_BREEDS: tuple[dict, ...] = (
    {
        "name": "Golden Retriever",
        "breed_group": "Sporting",
        "temperament": "Friendly, Intelligent, Devoted",
        "life_span": "10-12 years",
        "height_min_cm": 55,
        "height_max_cm": 61,
        "weight_min_kg": 25,
        "weight_max_kg": 34,
        "description": (
            "The Golden Retriever is a large-sized breed of dog bred as gun dogs "
            "to retrieve shot waterfowl."
        ),
        "image_url": (
            "https://images.unsplash.com/photo-1552053831-71594a27632d?w=400&h=300&fit=crop"
        ),
    },
    {
        "name": "German Shepherd",
        "breed_group": "Herding",
        "temperament": "Loyal, Courageous, Confident",
        "life_span": "7-10 years",
        "height_min_cm": 55,
        "height_max_cm": 65,
        "weight_min_kg": 22,
        "weight_max_kg": 40,
        "description": (
            "The German Shepherd is a breed of medium to large-sized working dog "
            "that originated in Germany."
        ),
        "image_url": (
            "https://images.unsplash.com/photo-1589941013453-ec89f33b5e95?w=400&h=300&fit=crop"
        ),
    },
    {
        "name": "Labrador Retriever",
        "breed_group": "Sporting",
        "temperament": "Friendly, Active, Outgoing",
        "life_span": "10-12 years",
        "height_min_cm": 55,
        "height_max_cm": 62,
        "weight_min_kg": 25,
        "weight_max_kg": 36,
        "description": "The Labrador Retriever is a medium-large breed of retriever-gun dog.",
        "image_url": (
            "https://images.unsplash.com/photo-1546527868-ccb7ee7dfa6a?w=400&h=300&fit=crop"
        ),
    },
)


def seed_breeds() -> list[Breed]:
    return [Breed.create(**data) for data in SEED_BREEDS]
