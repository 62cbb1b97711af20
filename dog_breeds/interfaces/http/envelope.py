"""Uniform JSON envelope for every response.

Success bodies are built as pydantic models so routes can declare them as
``response_model``; only the keys passed to the builders are marked as set,
which lets ``response_model_exclude_unset`` drop the rest. Error bodies are
plain dicts handed to ``JSONResponse`` by the error handlers.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: T | None = None
    message: str | None = None
    error: str | None = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int  # noqa: N815


class PaginatedResponse(ApiResponse[list[T]], Generic[T]):
    pagination: Pagination


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str | None = None


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def success_envelope(data: Any = None, message: str | None = None) -> ApiResponse[Any]:
    fields: dict[str, Any] = {"success": True}
    if data is not None:
        fields["data"] = data
    if message is not None:
        fields["message"] = message
    return ApiResponse[Any](**fields)


def paginated_envelope(
    items: Sequence[Any], *, page: int, limit: int, total: int
) -> PaginatedResponse[Any]:
    return PaginatedResponse[Any](
        success=True,
        data=list(items),
        pagination=Pagination(
            page=page, limit=limit, total=total, totalPages=total_pages(total, limit)
        ),
    )


def error_envelope(error: str, message: str | None = None) -> dict[str, Any]:
    return ErrorResponse(error=error, message=message).model_dump(exclude_none=True)
