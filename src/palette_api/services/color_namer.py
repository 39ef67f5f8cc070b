"""Reference palette and nearest-name lookup for extracted colors."""

import logging
from dataclasses import dataclass

import webcolors

from palette_api.schemas.color import RGB, ColorDescription

logger = logging.getLogger(__name__)

UNKNOWN_LOCALIZED = "未知"
UNKNOWN_STANDARD = "Unknown"

# Ten named reference colors with their Traditional Chinese labels.
# Table order is the tie-break order for nearest matches.
REFERENCE_COLORS = {
    "Blue": {"hex": "#0000FF", "chinese": "標準純藍"},
    "Gray": {"hex": "#808080", "chinese": "中性灰"},
    "White": {"hex": "#FFFFFF", "chinese": "白色"},
    "Brown": {"hex": "#8B4513", "chinese": "棕色"},
    "Yellow": {"hex": "#FFFF00", "chinese": "純黃色"},
    "Orange": {"hex": "#FFA500", "chinese": "標準橙色"},
    "Black": {"hex": "#000000", "chinese": "黑色"},
    "Red": {"hex": "#FF0000", "chinese": "純紅"},
    "Purple": {"hex": "#800080", "chinese": "標準紫色"},
    "Green": {"hex": "#008000", "chinese": "標準綠色"},
}


@dataclass(frozen=True)
class ReferenceColor:
    """A named entry of the reference palette."""

    name: str
    hex: str
    rgb: tuple[int, int, int]


def to_hex(rgb: tuple[int, int, int]) -> str:
    """Render an RGB triple as ``#RRGGBB`` with uppercase digits."""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def standard_name(hex_value: str) -> str:
    """Exact CSS3 name for a hex value, or ``Unknown``."""
    try:
        return webcolors.hex_to_name(hex_value, spec=webcolors.CSS3)
    except ValueError:
        return UNKNOWN_STANDARD


class NearestColorMatcher:
    """Nearest match over a fixed set of colors in RGB space.

    Distance is squared Euclidean; on equal distance the first entry wins.
    """

    def __init__(self, colors: dict[str, str]) -> None:
        if not colors:
            raise ValueError("NearestColorMatcher needs at least one color")
        self._entries = tuple(
            ReferenceColor(name=name, hex=hex_value.upper(), rgb=tuple(webcolors.hex_to_rgb(hex_value)))
            for name, hex_value in colors.items()
        )

    @property
    def entries(self) -> tuple[ReferenceColor, ...]:
        return self._entries

    def nearest(self, rgb: tuple[int, int, int]) -> ReferenceColor:
        r, g, b = rgb
        best = self._entries[0]
        best_distance = None
        for entry in self._entries:
            er, eg, eb = entry.rgb
            distance = (er - r) ** 2 + (eg - g) ** 2 + (eb - b) ** 2
            if best_distance is None or distance < best_distance:
                best, best_distance = entry, distance
        return best


class ColorNamer:
    """Turns raw RGB triples into ColorDescription records.

    Built once at startup and shared read-only between requests.
    """

    def __init__(self, reference: dict[str, dict[str, str]] | None = None) -> None:
        reference = reference if reference is not None else REFERENCE_COLORS
        self._localized = {name: entry["chinese"] for name, entry in reference.items() if entry.get("chinese")}
        self._matcher = NearestColorMatcher({name: entry["hex"] for name, entry in reference.items()})
        # The standard name is looked up by the matched reference hex, not
        # the pixel hex, so it can be resolved per entry up front. This is
        # intentionally an exact CSS3 name ("red", "saddlebrown") rather than
        # the constant "Unknown" a hex-vs-RGB comparison would produce.
        self._standard = {entry.name: standard_name(entry.hex) for entry in self._matcher.entries}
        logger.debug("Reference palette loaded: %s", self._standard)

    def describe(self, rgb: tuple[int, int, int]) -> ColorDescription:
        """Build the full description for one color."""
        r, g, b = rgb
        nearest = self._matcher.nearest(rgb)
        return ColorDescription(
            rgb=RGB(r=r, g=g, b=b),
            hex=to_hex(rgb),
            eng_name=nearest.name,
            chinese_name=self._localized.get(nearest.name, UNKNOWN_LOCALIZED),
            eng_stander_name=self._standard.get(nearest.name, UNKNOWN_STANDARD),
        )
