"""Movement schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from cashbook.application.queries.report_query import round_money
from cashbook.domain.movement import MovementView


class MovementUserResponse(BaseModel):
    id: UUID
    name: str


class MovementResponse(BaseModel):
    """A movement together with the user who recorded it."""

    id: UUID
    concept: str
    amount: float
    type: str
    date: datetime
    user: MovementUserResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "concept": "Office rent",
                "amount": 1200.0,
                "type": "EXPENSE",
                "date": "2024-03-01T00:00:00Z",
                "user": {
                    "id": "660e8400-e29b-41d4-a716-446655440001",
                    "name": "Ada Lovelace",
                },
            },
        },
    )

    @classmethod
    def from_view(cls, view: MovementView) -> "MovementResponse":
        return cls(
            id=view.id,
            concept=view.concept,
            amount=float(round_money(view.amount)),
            type=view.type.value,
            date=view.date,
            user=MovementUserResponse(id=view.user_id, name=view.user_name),
        )


class MovementListResponse(BaseModel):
    movements: list[MovementResponse]
    total: int
