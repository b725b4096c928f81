"""Command layer. Write operations that change stored state."""

from cashbook.application.commands.create_movement_command import (
    CreateMovementCommand,
    NewMovement,
)
from cashbook.application.commands.update_user_command import (
    UpdateUserCommand,
    UserChanges,
)

__all__ = [
    "CreateMovementCommand",
    "NewMovement",
    "UpdateUserCommand",
    "UserChanges",
]
