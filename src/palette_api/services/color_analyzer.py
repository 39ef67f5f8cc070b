"""Color analysis service - uses colorthief for dominant color and palette."""

import asyncio
import io
import logging
import time

from colorthief import ColorThief

from palette_api.config import get_settings
from palette_api.core.exceptions import ExtractionError
from palette_api.core.logging import AnalysisLogger, EventType
from palette_api.schemas.color import AnalysisResult
from palette_api.services.color_namer import ColorNamer

logger = logging.getLogger(__name__)

RGBTuple = tuple[int, int, int]


def _clamp(color) -> RGBTuple:
    # Empty quantizer boxes at the channel edge can average to 256.
    r, g, b = (max(0, min(255, int(c))) for c in color)
    return (r, g, b)


def extract_dominant(buffer: bytes, quality: int = 10) -> RGBTuple:
    """Single most representative color of the image."""
    return _clamp(ColorThief(io.BytesIO(buffer)).get_color(quality=quality))


def extract_palette(buffer: bytes, count: int, quality: int = 10) -> list[RGBTuple]:
    """Up to ``count`` representative colors, in quantizer order."""
    palette = ColorThief(io.BytesIO(buffer)).get_palette(color_count=count, quality=quality)
    return [_clamp(color) for color in palette[:count]]


class ColorAnalyzerService:
    """Service for color analysis of uploaded images."""

    def __init__(
        self,
        namer: ColorNamer,
        events: AnalysisLogger,
        palette_size: int | None = None,
        quality: int | None = None,
    ) -> None:
        settings = get_settings()
        self.namer = namer
        self.events = events
        self.palette_size = palette_size if palette_size is not None else settings.palette_size
        self.quality = quality if quality is not None else settings.color_quality

    async def get_dominant_color(self, buffer: bytes) -> RGBTuple:
        return await asyncio.to_thread(extract_dominant, buffer, self.quality)

    async def get_palette(self, buffer: bytes, count: int) -> list[RGBTuple]:
        return await asyncio.to_thread(extract_palette, buffer, count, self.quality)

    async def analyze(self, buffer: bytes) -> AnalysisResult:
        """Extract dominant color and palette concurrently and describe them."""
        start_time = time.time()
        self.events.log(EventType.ANALYZE_START, {"image_size": len(buffer)})

        try:
            dominant_rgb, palette_rgb = await asyncio.gather(
                self.get_dominant_color(buffer),
                self.get_palette(buffer, self.palette_size),
            )
        except Exception as e:
            duration_ms = int((time.time() - start_time) * 1000)
            logger.exception("Color extraction failed")
            self.events.log_failure("EXTRACTION_ERROR", len(buffer), duration_ms)
            raise ExtractionError("Failed to extract colors from image", {"reason": type(e).__name__}) from e

        result = AnalysisResult(
            dominant=self.namer.describe(dominant_rgb),
            palette=[self.namer.describe(rgb) for rgb in palette_rgb],
        )

        duration_ms = int((time.time() - start_time) * 1000)
        self.events.log_analysis(
            image_size=len(buffer),
            dominant_hex=result.dominant.hex,
            palette_size=len(result.palette),
            duration_ms=duration_ms,
        )
        return result
