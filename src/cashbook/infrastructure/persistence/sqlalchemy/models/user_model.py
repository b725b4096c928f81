"""SQLAlchemy model for User aggregate."""

from typing import Optional
from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from cashbook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    Email is unique and lowercased by the domain. ``github_id`` links the
    account to its OAuth identity once the user has logged in.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="USER")
    image: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    github_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        unique=True,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"
