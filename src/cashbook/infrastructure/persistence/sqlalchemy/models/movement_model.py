"""SQLAlchemy model for Movement aggregate."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from cashbook.domain.shared.time import utc_now
from cashbook.infrastructure.persistence.sqlalchemy.models.base import Base


class MovementModel(Base):
    """
    Income or expense record.

    Amounts are stored as exact decimals with two places.

    Table: movements
    """

    __tablename__ = "movements"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    concept: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<MovementModel(id={self.id}, type={self.type}, amount={self.amount})>"
        )
