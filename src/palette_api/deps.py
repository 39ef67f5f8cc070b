"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from palette_api.config import Settings, get_settings
from palette_api.services import ColorAnalyzerService

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_color_service(request: Request) -> ColorAnalyzerService:
    """Get the ColorAnalyzerService built at startup."""
    return request.app.state.color_service


ColorServiceDep = Annotated[ColorAnalyzerService, Depends(get_color_service)]
