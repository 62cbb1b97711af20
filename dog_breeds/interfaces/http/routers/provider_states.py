"""Provider-state hook used by consumer contract tests.

Mounted only when ``ENABLE_PROVIDER_STATES`` is set; puts the breed table
into the state a contract interaction expects before it is replayed.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from dog_breeds.application.use_cases.breeds import reset_breeds
from dog_breeds.infrastructure.db.session import SQLAlchemyUnitOfWork
from dog_breeds.interfaces.http.deps import get_uow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contract-testing"], include_in_schema=False)

# Satisfied by the seeded table as-is
PASSIVE_STATES = frozenset(
    {
        "has breeds in database",
        "has breed with id 1",
        "breed does not exist",
        "API is running",
    }
)


class ProviderState(BaseModel):
    state: str | None = None


@router.post("/_pactSetup")
async def setup_provider_state(
    payload: ProviderState,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
) -> Response:
    state = payload.state
    logger.info("Setting up provider state: %s", state)
    if state == "database is empty":
        await reset_breeds.clear(uow)
    elif state == "reset to seed":
        await reset_breeds.reseed(uow)
    elif state not in PASSIVE_STATES:
        logger.warning("Unknown provider state: %s", state)
    return Response(status_code=status.HTTP_200_OK)
