"""API v1 routes."""

from palette_api.api.v1.router import router

__all__ = ["router"]
