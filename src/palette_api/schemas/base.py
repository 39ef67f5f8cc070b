"""Base schemas for API responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response."""

    error: str


class HealthResponse(BaseModel):
    """Health check body."""

    status: Literal["ok"] = "ok"
