"""
Tests for reference-palette naming.
"""

import re

import pytest

from palette_api.services.color_namer import (
    REFERENCE_COLORS,
    ColorNamer,
    NearestColorMatcher,
    standard_name,
    to_hex,
)

HEX_PATTERN = re.compile(r"^#[0-9A-F]{6}$")


@pytest.fixture(scope="module")
def namer():
    return ColorNamer()


class TestToHex:
    def test_pads_and_uppercases(self):
        assert to_hex((0, 10, 255)) == "#000AFF"

    def test_black_and_white(self):
        assert to_hex((0, 0, 0)) == "#000000"
        assert to_hex((255, 255, 255)) == "#FFFFFF"

    @pytest.mark.parametrize("rgb", [(1, 2, 3), (171, 205, 239), (128, 0, 64)])
    def test_consistent_with_channels(self, rgb):
        value = to_hex(rgb)
        assert HEX_PATTERN.match(value)
        assert tuple(int(value[i:i + 2], 16) for i in (1, 3, 5)) == rgb


class TestNearestColorMatcher:
    def test_exact_match(self):
        matcher = NearestColorMatcher({name: entry["hex"] for name, entry in REFERENCE_COLORS.items()})
        assert matcher.nearest((128, 0, 128)).name == "Purple"

    def test_near_match(self):
        matcher = NearestColorMatcher({name: entry["hex"] for name, entry in REFERENCE_COLORS.items()})
        assert matcher.nearest((250, 160, 10)).name == "Orange"
        assert matcher.nearest((20, 20, 20)).name == "Black"
        assert matcher.nearest((10, 10, 230)).name == "Blue"

    def test_tie_goes_to_first_entry(self):
        matcher = NearestColorMatcher({"Low": "#000000", "High": "#020202"})
        assert matcher.nearest((1, 1, 1)).name == "Low"

        matcher = NearestColorMatcher({"High": "#020202", "Low": "#000000"})
        assert matcher.nearest((1, 1, 1)).name == "High"

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError):
            NearestColorMatcher({})


class TestColorNamer:
    def test_pure_red(self, namer):
        description = namer.describe((255, 0, 0))

        assert description.hex == "#FF0000"
        assert description.eng_name == "Red"
        assert description.chinese_name == "純紅"
        assert description.eng_stander_name == "red"

    def test_standard_name_follows_reference_match(self, namer):
        # Dark orange pixel still reports the name of the matched reference color
        description = namer.describe((250, 160, 10))

        assert description.hex == "#FAA00A"
        assert description.eng_name == "Orange"
        assert description.chinese_name == "標準橙色"
        assert description.eng_stander_name == "orange"

    def test_brown_maps_to_css_name(self, namer):
        description = namer.describe((139, 69, 19))

        assert description.eng_name == "Brown"
        assert description.eng_stander_name == "saddlebrown"

    def test_every_reference_color_has_standard_name(self, namer):
        for name, entry in REFERENCE_COLORS.items():
            r, g, b = (int(entry["hex"][i:i + 2], 16) for i in (1, 3, 5))
            description = namer.describe((r, g, b))
            assert description.eng_name == name
            assert description.chinese_name == entry["chinese"]
            assert description.eng_stander_name != "Unknown"

    def test_unknown_fallbacks(self):
        namer = ColorNamer({"Odd": {"hex": "#123456"}})
        description = namer.describe((18, 52, 86))

        assert description.eng_name == "Odd"
        assert description.chinese_name == "未知"
        assert description.eng_stander_name == "Unknown"

    def test_serializes_with_wire_names(self, namer):
        payload = namer.describe((255, 0, 0)).model_dump(by_alias=True)

        assert payload == {
            "rgb": {"r": 255, "g": 0, "b": 0},
            "hex": "#FF0000",
            "engName": "Red",
            "chineseName": "純紅",
            "engStanderName": "red",
        }


def test_standard_name_lookup():
    assert standard_name("#FFFFFF") == "white"
    assert standard_name("#123456") == "Unknown"
