"""Request-level checks that run before any storage access.

Per-field payload rules live on the pydantic request schemas; this module
holds the query/path parameter parsers and the cross-field span rules that
need their own error text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from dog_breeds.application.errors import ValidationError
from dog_breeds.domain.models.breed import Breed, Span

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

INVALID_PAGINATION = "Invalid pagination parameters. Page must be >= 1, limit must be 1-100"
INVALID_BREED_ID = "Invalid breed ID"
SEARCH_QUERY_REQUIRED = "Search query is required"
HEIGHT_SPAN_INVERTED = "Height min cannot be greater than height max"
WEIGHT_SPAN_INVERTED = "Weight min cannot be greater than weight max"

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


def _parse_int(raw: str) -> int | None:
    value = raw.strip()
    if not _INTEGER_RE.match(value):
        return None
    return int(value)


def parse_pagination(page: str | None, limit: str | None) -> PageRequest:
    """Parse raw ``page``/``limit`` query values, applying defaults when absent.

    Both values are checked, but any failure is reported as one combined error.
    """
    page_value = DEFAULT_PAGE
    limit_value = DEFAULT_LIMIT
    if page is not None:
        parsed = _parse_int(page)
        if parsed is None or parsed < 1:
            raise ValidationError(INVALID_PAGINATION)
        page_value = parsed
    if limit is not None:
        parsed = _parse_int(limit)
        if parsed is None or parsed < 1 or parsed > MAX_LIMIT:
            raise ValidationError(INVALID_PAGINATION)
        limit_value = parsed
    return PageRequest(page=page_value, limit=limit_value)


def parse_breed_id(raw: str | int) -> int:
    if isinstance(raw, int):
        value: int | None = raw
    else:
        value = _parse_int(raw)
    if value is None or value < 1:
        raise ValidationError(INVALID_BREED_ID)
    return value


def require_search_query(query: str | None) -> str:
    if query is None or not query.strip():
        raise ValidationError(SEARCH_QUERY_REQUIRED)
    return query.strip()


def ensure_spans_ordered(height_cm: Span | None, weight_kg: Span | None) -> None:
    """Reject inverted spans; height is checked before weight."""
    if height_cm is not None and not height_cm.is_ordered():
        raise ValidationError(HEIGHT_SPAN_INVERTED)
    if weight_kg is not None and not weight_kg.is_ordered():
        raise ValidationError(WEIGHT_SPAN_INVERTED)


def ensure_breed_spans(breed: Breed) -> None:
    ensure_spans_ordered(breed.height_cm, breed.weight_kg)
