"""Movements router: list for everyone, create for administrators."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, status
from fastapi.responses import JSONResponse

from cashbook.application.commands import CreateMovementCommand, NewMovement
from cashbook.application.queries import DEFAULT_PAGE_SIZE, ListMovementsQuery
from cashbook.domain.validation import validate_movement
from cashbook.presentation.api.dependencies import (
    AdminSession,
    AuthenticatedSession,
    RepoFactory,
)
from cashbook.presentation.api.exception_handlers import validation_error_response
from cashbook.presentation.api.schemas import (
    MovementListResponse,
    MovementResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List movements",
    responses={401: {"description": "Not authenticated"}},
)
async def list_movements(
    _session: AuthenticatedSession,
    factory: RepoFactory,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    movement_type: Annotated[str | None, Query(alias="type")] = None,
) -> MovementListResponse:
    """
    List movements, newest first.

    ``limit`` is clamped to 1..100 and ``page`` to at least 1. A ``type``
    other than INCOME or EXPENSE is ignored.
    """
    query = ListMovementsQuery.from_factory(factory)
    result = await query.execute(page=page, limit=limit, type_filter=movement_type)
    return MovementListResponse(
        movements=[MovementResponse.from_view(view) for view in result.movements],
        total=result.total,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a movement",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid data"},
        401: {"description": "Not authenticated"},
        403: {"description": "Admin access required"},
    },
    response_model=MovementResponse,
)
async def create_movement(
    session: AdminSession,
    factory: RepoFactory,
    payload: Annotated[dict[str, Any], Body()],
) -> MovementResponse | JSONResponse:
    """Record an income or expense owned by the calling administrator."""
    result = validate_movement(payload)
    if not result.is_valid:
        return validation_error_response(result.errors)

    command = CreateMovementCommand.from_factory(factory)
    try:
        view = await command.execute(NewMovement.from_validated(payload), session.user)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MovementResponse.from_view(view)
