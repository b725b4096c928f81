"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "User not found", "code": "USER_NOT_FOUND"},
        },
    )


class ValidationErrorResponse(ErrorResponse):
    """Error response carrying every failed validation rule."""

    errors: list[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Invalid data",
                "code": "VALIDATION_ERROR",
                "errors": ["Concept is required", "Amount must be greater than 0"],
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
