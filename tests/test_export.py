"""
Unit tests for palette and gradient export formats.
"""
import json

import pytest

from palettesync.services.colors.export import (
    export_gradient, export_gradient_css, export_gradient_tailwind, export_palette
)
from palettesync.services.colors.gradients import linear_gradient, radial_gradient
from palettesync.services.colors.harmony import PaletteType
from palettesync.services.colors.harmony.orchestrator import build_palette
from palettesync.services.colors.model import Color

RED = Color.from_hex("#ff0000")
BLUE = Color.from_hex("#0000ff")


@pytest.fixture
def complementary():
    return build_palette(PaletteType.COMPLEMENTARY, RED)


class TestPaletteExport:

    def test_json(self, complementary):
        content = export_palette(complementary, "json")
        assert content.startswith('{\n  "name": "Complementary",\n  "type": "complementary",')
        assert json.loads(content) == {
            "name": "Complementary",
            "type": "complementary",
            "colors": [
                {"hex": "#ff0000", "rgb": {"r": 255, "g": 0, "b": 0}, "hsl": {"h": 0, "s": 100, "l": 50}},
                {"hex": "#00ffff", "rgb": {"r": 0, "g": 255, "b": 255}, "hsl": {"h": 180, "s": 100, "l": 50}},
            ],
        }

    def test_css(self, complementary):
        assert export_palette(complementary, "css") == (
            ":root {\n"
            "  --color-complementary-1: #ff0000;\n"
            "  --color-complementary-2: #00ffff;\n"
            "}"
        )

    def test_tailwind(self, complementary):
        content = export_palette(complementary, "tailwind")
        assert content.startswith("module.exports = {\n  theme: {\n    extend: {\n      colors: {\n")
        assert "        'complementary': {\n          100: '#ff0000',\n          200: '#00ffff',\n        },\n" in content
        assert content.endswith("  },\n}")

    def test_tailwind_shade_ladder(self):
        palette = build_palette(PaletteType.MONOCHROMATIC, Color.from_hex("#808080"))
        content = export_palette(palette, "tailwind")
        for shade in (100, 200, 300, 400, 500):
            assert f"          {shade}: '#" in content
        assert "600:" not in content

    def test_unknown_format(self, complementary):
        with pytest.raises(ValueError):
            export_palette(complementary, "scss")


class TestGradientExport:

    def test_css(self, tokens):
        gradient = linear_gradient([RED, BLUE], 90, tokens)
        assert export_gradient_css(gradient) == (
            ".gradient-linear-90-1 {\n"
            "  background: linear-gradient(90deg, #ff0000, #0000ff);\n"
            "}"
        )

    def test_tailwind_keeps_zero_angle(self, tokens):
        gradient = linear_gradient([RED, BLUE], 0, tokens)
        assert export_gradient_tailwind(gradient) == (
            "// Add to tailwind.config.js\n"
            "backgroundImage: {\n"
            "  'gradient-linear-0-1': 'linear-gradient(0deg, #ff0000, #0000ff)',\n"
            "}"
        )

    def test_tailwind_radial_falls_back_to_90(self, tokens):
        gradient = radial_gradient([RED, BLUE], tokens)
        assert "'gradient-radial-1': 'linear-gradient(90deg, #ff0000, #0000ff)'" in export_gradient_tailwind(gradient)

    def test_dispatch(self, tokens):
        gradient = linear_gradient([RED, BLUE], 45, tokens)
        assert export_gradient(gradient, "css") == export_gradient_css(gradient)
        with pytest.raises(ValueError):
            export_gradient(gradient, "json")
