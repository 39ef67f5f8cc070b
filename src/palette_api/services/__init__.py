"""Service layer for Palette API."""

from palette_api.services.color_analyzer import ColorAnalyzerService
from palette_api.services.color_namer import ColorNamer, NearestColorMatcher

__all__ = [
    "ColorAnalyzerService",
    "ColorNamer",
    "NearestColorMatcher",
]
