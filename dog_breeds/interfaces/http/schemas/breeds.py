from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from dog_breeds.domain.models.breed import Breed, BreedPatch

_URL_ADAPTER = TypeAdapter(AnyUrl)

IMAGE_URL_MESSAGE = "Image URL must be a valid URL"
HEIGHT_MIN_MESSAGE = "Height min must be between 1-200 cm"
HEIGHT_MAX_MESSAGE = "Height max must be between 1-200 cm"
WEIGHT_MIN_MESSAGE = "Weight min must be between 0.1-200 kg"
WEIGHT_MAX_MESSAGE = "Weight max must be between 0.1-200 kg"

_TEXT_RULES = {
    "name": ("Name", 1, 100),
    "breed_group": ("Breed group", 1, 50),
    "temperament": ("Temperament", 1, 200),
    "life_span": ("Life span", 1, 50),
    "description": ("Description", 10, 1000),
}


def _field_messages(*, partial: bool) -> dict[str, tuple[str, ...]]:
    messages: dict[str, tuple[str, ...]] = {}
    for field_name, (label, low, high) in _TEXT_RULES.items():
        if partial:
            messages[field_name] = (f"{label} must be {low}-{high} characters",)
        else:
            messages[field_name] = (f"{label} is required and must be {low}-{high} characters",)
    messages.update(
        {
            "height_cm": (HEIGHT_MIN_MESSAGE, HEIGHT_MAX_MESSAGE),
            "height_cm.min": (HEIGHT_MIN_MESSAGE,),
            "height_cm.max": (HEIGHT_MAX_MESSAGE,),
            "weight_kg": (WEIGHT_MIN_MESSAGE, WEIGHT_MAX_MESSAGE),
            "weight_kg.min": (WEIGHT_MIN_MESSAGE,),
            "weight_kg.max": (WEIGHT_MAX_MESSAGE,),
            "image_url": (IMAGE_URL_MESSAGE,),
        }
    )
    return messages


CREATE_FIELD_MESSAGES = _field_messages(partial=False)
UPDATE_FIELD_MESSAGES = _field_messages(partial=True)


def describe_validation_errors(errors: Iterable[Mapping[str, Any]], *, partial: bool) -> str:
    """Turn pydantic error entries into the comma separated field messages."""
    table = UPDATE_FIELD_MESSAGES if partial else CREATE_FIELD_MESSAGES
    messages: list[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        if error.get("type") == "json_invalid":
            found: tuple[str, ...] = ("Request body must be valid JSON",)
        elif not loc:
            found = ("Request body is required",)
        else:
            found = table.get(".".join(loc[:2]), (str(error.get("msg", "Invalid value")),))
        for message in found:
            if message not in messages:
                messages.append(message)
    return ", ".join(messages)


def _valid_image_url(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        parsed = _URL_ADAPTER.validate_python(value)
    except ValueError:
        raise ValueError(IMAGE_URL_MESSAGE) from None
    if not parsed.host:
        raise ValueError(IMAGE_URL_MESSAGE)
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("Field cannot be null")
    return value


def _reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(value, bool):
        raise ValueError("Value must be a number")
    return value


class HeightSpan(BaseModel):
    min: int = Field(ge=1, le=200, examples=[55])
    max: int = Field(ge=1, le=200, examples=[61])

    reject_bools = field_validator("min", "max", mode="before")(_reject_bool)


class WeightSpan(BaseModel):
    min: float = Field(ge=0.1, le=200, examples=[25])
    max: float = Field(ge=0.1, le=200, examples=[34])

    reject_bools = field_validator("min", "max", mode="before")(_reject_bool)


class BreedCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100, examples=["Border Collie"])
    breed_group: str = Field(min_length=1, max_length=50, examples=["Herding"])
    temperament: str = Field(
        min_length=1, max_length=200, examples=["Intelligent, Energetic, Responsive"]
    )
    life_span: str = Field(min_length=1, max_length=50, examples=["12-15 years"])
    height_cm: HeightSpan
    weight_kg: WeightSpan
    description: str = Field(
        min_length=10,
        max_length=1000,
        examples=["The Border Collie is a working and herding dog breed."],
    )
    image_url: str | None = Field(None, examples=["https://example.com/border-collie.jpg"])

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, value: str | None) -> str | None:
        return _valid_image_url(value)


class HeightSpanUpdate(BaseModel):
    min: int | None = Field(None, ge=1, le=200)
    max: int | None = Field(None, ge=1, le=200)

    reject_nulls = field_validator("min", "max", mode="before")(_reject_null)
    reject_bools = field_validator("min", "max", mode="before")(_reject_bool)


class WeightSpanUpdate(BaseModel):
    min: float | None = Field(None, ge=0.1, le=200)
    max: float | None = Field(None, ge=0.1, le=200)

    reject_nulls = field_validator("min", "max", mode="before")(_reject_null)
    reject_bools = field_validator("min", "max", mode="before")(_reject_bool)


class BreedUpdate(BaseModel):
    """Partial update; only the keys present in the request body are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=100)
    breed_group: str | None = Field(None, min_length=1, max_length=50)
    temperament: str | None = Field(None, min_length=1, max_length=200)
    life_span: str | None = Field(None, min_length=1, max_length=50)
    height_cm: HeightSpanUpdate | None = None
    weight_kg: WeightSpanUpdate | None = None
    description: str | None = Field(None, min_length=10, max_length=1000)
    # null clears the stored image
    image_url: str | None = None

    reject_nulls = field_validator(
        "name",
        "breed_group",
        "temperament",
        "life_span",
        "height_cm",
        "weight_kg",
        "description",
        mode="before",
    )(_reject_null)

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, value: str | None) -> str | None:
        return _valid_image_url(value)

    def to_patch(self) -> BreedPatch:
        sent = self.model_fields_set
        changes: dict[str, Any] = {}
        for field_name in (
            "name",
            "breed_group",
            "temperament",
            "life_span",
            "description",
            "image_url",
        ):
            if field_name in sent:
                changes[field_name] = getattr(self, field_name)
        if self.height_cm is not None:
            if "min" in self.height_cm.model_fields_set:
                changes["height_min_cm"] = self.height_cm.min
            if "max" in self.height_cm.model_fields_set:
                changes["height_max_cm"] = self.height_cm.max
        if self.weight_kg is not None:
            if "min" in self.weight_kg.model_fields_set:
                changes["weight_min_kg"] = self.weight_kg.min
            if "max" in self.weight_kg.model_fields_set:
                changes["weight_max_kg"] = self.weight_kg.max
        return BreedPatch(changes=changes)


class HeightSpanResponse(BaseModel):
    min: int
    max: int


class WeightSpanResponse(BaseModel):
    min: float
    max: float


class BreedResponse(BaseModel):
    id: int
    name: str
    breed_group: str
    temperament: str
    life_span: str
    height_cm: HeightSpanResponse
    weight_kg: WeightSpanResponse
    description: str
    image_url: str | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_domain(cls, breed: Breed) -> BreedResponse:
        return cls(
            id=breed.id,
            name=breed.name,
            breed_group=breed.breed_group,
            temperament=breed.temperament,
            life_span=breed.life_span,
            height_cm=HeightSpanResponse(min=breed.height_cm.min, max=breed.height_cm.max),
            weight_kg=WeightSpanResponse(min=breed.weight_kg.min, max=breed.weight_kg.max),
            description=breed.description,
            image_url=breed.image_url,
            created_at=breed.created_at,
            updated_at=breed.updated_at,
        )
