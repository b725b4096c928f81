"""User domain exceptions."""

from cashbook.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class CannotDemoteSelfError(ValidationError):
    """Cannot demote yourself from admin."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot demote yourself from admin",
            code=ErrorCode.CANNOT_DEMOTE_SELF,
        )


class NoUpdatableFieldsError(ValidationError):
    """An update request carried none of the editable fields."""

    def __init__(self) -> None:
        super().__init__(
            "No data provided to update",
            code=ErrorCode.NO_UPDATABLE_FIELDS,
        )
