"""User administration router."""

import logging
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body

from cashbook.application.commands import UpdateUserCommand, UserChanges
from cashbook.application.queries import ListUsersQuery
from cashbook.domain.user import UserNotFoundError
from cashbook.domain.validation import validate_user_update
from cashbook.presentation.api.dependencies import AdminSession, RepoFactory
from cashbook.presentation.api.exception_handlers import validation_error_response
from cashbook.presentation.api.schemas import (
    UpdatedUserResponse,
    UserListResponse,
    UserResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List all users",
    responses={
        200: {"description": "Users ordered by name"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(
    _admin: AdminSession,  # Used for authorization check
    factory: RepoFactory,
) -> UserListResponse:
    users = await ListUsersQuery.from_factory(factory).execute()
    return UserListResponse(
        users=[UserResponse.from_user(user) for user in users],
        total=len(users),
    )


@router.put(
    "/{user_id}",
    summary="Update a user's name or role",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid data"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
    response_model=UpdatedUserResponse,
)
async def update_user(
    user_id: str,
    admin: AdminSession,
    factory: RepoFactory,
    payload: Annotated[dict[str, Any], Body()],
):
    """Only ``name`` and ``role`` are editable; other keys are ignored."""
    try:
        user_uuid = UUID(user_id)
    except ValueError as e:
        raise UserNotFoundError(user_id) from e

    user_repo = factory.user_repository()
    user = await user_repo.find_by_id(user_uuid)
    if user is None:
        raise UserNotFoundError(user_id)

    result = validate_user_update(payload)
    if not result.is_valid:
        return validation_error_response(result.errors)

    command = UpdateUserCommand.from_factory(factory)
    try:
        updated = await command.execute(
            user=user,
            changes=UserChanges.from_validated(payload),
            requesting_admin_id=admin.user.id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Admin %s updated user %s", admin.user.email, updated.id)
    return UpdatedUserResponse.from_user(updated)
