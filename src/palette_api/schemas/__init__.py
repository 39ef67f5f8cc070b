"""Pydantic schemas for Palette API."""

from palette_api.schemas.base import BaseSchema, ErrorResponse, HealthResponse
from palette_api.schemas.color import RGB, AnalysisResult, ColorDescription

__all__ = [
    # Base
    "BaseSchema",
    "ErrorResponse",
    "HealthResponse",
    # Color
    "RGB",
    "AnalysisResult",
    "ColorDescription",
]
