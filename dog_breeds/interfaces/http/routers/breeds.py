from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from dog_breeds.application.use_cases.breeds import (
    create_breed,
    delete_breed,
    get_breed,
    list_breeds,
    search_breeds,
    update_breed,
)
from dog_breeds.application.validation import parse_breed_id, parse_pagination
from dog_breeds.infrastructure.db.session import SQLAlchemyUnitOfWork
from dog_breeds.interfaces.http.deps import get_uow
from dog_breeds.interfaces.http.envelope import (
    ApiResponse,
    ErrorResponse,
    PaginatedResponse,
    paginated_envelope,
    success_envelope,
)
from dog_breeds.interfaces.http.schemas.breeds import BreedCreate, BreedResponse, BreedUpdate

router = APIRouter(prefix="/api/breeds", tags=["breeds"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Breed not found"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Breed name already exists"}}


@router.get(
    "/search",
    response_model=ApiResponse[list[BreedResponse]],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="Search breeds by name, breed group or temperament",
)
async def search_breeds_endpoint(
    q: str | None = Query(None, description="Case-insensitive substring to look for"),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    breeds = await search_breeds.execute(uow, q)
    return success_envelope(
        data=[BreedResponse.from_domain(b) for b in breeds],
        message=f'Found {len(breeds)} breeds matching "{q.strip()}"',
    )


@router.get(
    "",
    response_model=PaginatedResponse[BreedResponse],
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
    summary="List breeds ordered by name",
)
async def list_breeds_endpoint(
    page: str | None = Query(None, description="Page number, >= 1 (default 1)"),
    limit: str | None = Query(None, description="Page size, 1-100 (default 10)"),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    page_request = parse_pagination(page, limit)
    result = await list_breeds.execute(uow, page_request)
    return paginated_envelope(
        [BreedResponse.from_domain(b) for b in result.items],
        page=result.page,
        limit=result.limit,
        total=result.total,
    )


@router.get(
    "/{breed_id}",
    response_model=ApiResponse[BreedResponse],
    response_model_exclude_unset=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND},
    summary="Get a breed by id",
)
async def get_breed_endpoint(breed_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breed = await get_breed.execute(uow, parse_breed_id(breed_id))
    return success_envelope(data=BreedResponse.from_domain(breed))


@router.post(
    "",
    response_model=ApiResponse[BreedResponse],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    responses={**ERROR_RESPONSES, **CONFLICT},
    summary="Create a breed",
)
async def create_breed_endpoint(
    payload: BreedCreate,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    created = await create_breed.execute(
        uow,
        create_breed.CreateBreedInput(
            name=payload.name,
            breed_group=payload.breed_group,
            temperament=payload.temperament,
            life_span=payload.life_span,
            height_min_cm=payload.height_cm.min,
            height_max_cm=payload.height_cm.max,
            weight_min_kg=payload.weight_kg.min,
            weight_max_kg=payload.weight_kg.max,
            description=payload.description,
            image_url=payload.image_url,
        ),
    )
    return success_envelope(
        data=BreedResponse.from_domain(created), message="Breed created successfully"
    )


@router.put(
    "/{breed_id}",
    response_model=ApiResponse[BreedResponse],
    response_model_exclude_unset=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND, **CONFLICT},
    summary="Update a breed; omitted fields keep their value",
)
async def update_breed_endpoint(
    breed_id: str,
    payload: BreedUpdate,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    updated = await update_breed.execute(uow, parse_breed_id(breed_id), payload.to_patch())
    return success_envelope(
        data=BreedResponse.from_domain(updated), message="Breed updated successfully"
    )


@router.delete(
    "/{breed_id}",
    response_model=ApiResponse[None],
    response_model_exclude_unset=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND},
    summary="Delete a breed",
)
async def delete_breed_endpoint(breed_id: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_breed.execute(uow, parse_breed_id(breed_id))
    return success_envelope(message="Breed deleted successfully")
