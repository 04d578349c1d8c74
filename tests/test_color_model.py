"""
Unit tests for the Color value type and HSL transforms.
"""
import pytest

from palettesync.services.colors.model import (
    Color, ColorFormatError, color_distance, hex_to_rgb, rgb_to_hsl,
    rotate_hue, round_half_up, with_lightness
)


def hue_delta(a: int, b: int) -> int:
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


class TestColorConstruction:
    """Test Color creation from rgb and hex"""

    def test_from_rgb_primary_colors(self):
        red = Color.from_rgb(255, 0, 0)
        assert red.hex == "#ff0000"
        assert red.rgb == (255, 0, 0)
        assert red.hsl == (0, 100, 50)

        blue = Color.from_rgb(0, 0, 255)
        assert blue.hsl == (240, 100, 50)

    def test_from_hex_is_case_insensitive_and_canonical(self):
        color = Color.from_hex("#1F4E79")
        assert color.hex == "#1f4e79"
        assert color.rgb == (31, 78, 121)
        assert Color.from_hex("#1f4e79") == color

    def test_gray_is_achromatic(self):
        gray = Color.from_hex("#808080")
        assert gray.hsl == (0, 0, 50)

    @pytest.mark.parametrize("bad", ["FF0000", "#FF00", "#GGGGGG", "#ff00000", "", "#ff 000", "#ff0000\n", " #ff0000"])
    def test_invalid_hex_format(self, bad):
        with pytest.raises(ColorFormatError):
            Color.from_hex(bad)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb("not-a-color")

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0)])
    def test_invalid_channels(self, channels):
        with pytest.raises(ColorFormatError):
            Color.from_rgb(*channels)

    def test_hex_roundtrip(self):
        for r in range(0, 256, 15):
            for g in range(0, 256, 51):
                for b in (0, 1, 127, 128, 254, 255):
                    original = Color.from_rgb(r, g, b)
                    assert Color.from_hex(original.hex).rgb == (r, g, b)

    def test_colors_are_immutable(self):
        color = Color.from_rgb(10, 20, 30)
        with pytest.raises(AttributeError):
            color.hex = "#000000"

    def test_to_dict(self):
        assert Color.from_hex("#ff0000").to_dict() == {
            "hex": "#ff0000",
            "rgb": {"r": 255, "g": 0, "b": 0},
            "hsl": {"h": 0, "s": 100, "l": 50},
        }


class TestConversions:
    """Test numeric helpers"""

    def test_round_half_up(self):
        assert round_half_up(24.5) == 25
        assert round_half_up(25.5) == 26
        assert round_half_up(24.49) == 24
        assert round_half_up(0.5) == 1

    def test_rgb_to_hsl_ranges(self):
        for rgb in [(0, 0, 0), (255, 255, 255), (255, 0, 128), (12, 200, 99)]:
            h, s, l = rgb_to_hsl(*rgb)
            assert 0 <= h < 360
            assert 0 <= s <= 100
            assert 0 <= l <= 100

    def test_color_distance(self):
        assert color_distance((0, 0, 0), (30, 40, 0)) == pytest.approx(50.0)
        assert color_distance((10, 10, 10), (10, 10, 10)) == 0


class TestHueRotation:
    """Test hue rotation mathematics"""

    def test_complementary_of_red_is_cyan(self):
        cyan = rotate_hue(Color.from_hex("#FF0000"), 180)
        assert cyan.hex == "#00ffff"
        assert cyan.hue == 180

    def test_full_turn_keeps_hue(self):
        for hex_color in ["#ff0000", "#1f4e79", "#d3b58f", "#2d7560", "#ff00aa"]:
            color = Color.from_hex(hex_color)
            assert hue_delta(rotate_hue(color, 360).hue, color.hue) <= 1

    def test_wraparound(self):
        color = Color.from_hls(350 / 360, 0.5, 1.0)
        assert hue_delta(rotate_hue(color, 30).hue, 20) <= 1

        color = Color.from_hls(10 / 360, 0.5, 1.0)
        assert hue_delta(rotate_hue(color, -30).hue, 340) <= 1

    def test_rotation_preserves_saturation_and_lightness(self):
        color = Color.from_hex("#2d7560")
        rotated = rotate_hue(color, 120)
        assert abs(rotated.saturation - color.saturation) <= 2
        assert abs(rotated.lightness - color.lightness) <= 2

    def test_gray_stays_gray(self):
        gray = Color.from_hex("#808080")
        assert rotate_hue(gray, 90) == gray


class TestWithLightness:
    """Test lightness override"""

    def test_sets_lightness(self):
        dark_red = with_lightness(Color.from_hex("#ff0000"), 0.25)
        assert dark_red.hex == "#800000"
        assert dark_red.hsl == (0, 100, 25)

    def test_clamps_out_of_range(self):
        red = Color.from_hex("#ff0000")
        assert with_lightness(red, 1.5).hex == "#ffffff"
        assert with_lightness(red, -0.2).hex == "#000000"
