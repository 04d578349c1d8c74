"""
Export formatting for palettes and gradients.

Pure string producers; file naming and delivery belong to the caller.
"""

import json
from typing import Literal

from .gradients import Gradient
from .harmony import Palette

ExportFormat = Literal["json", "css", "tailwind"]
GradientExportFormat = Literal["css", "tailwind"]


def palette_to_json(palette: Palette) -> str:
    """Name, type and colors (hex/rgb/hsl) pretty-printed with a 2-space indent."""
    payload = {
        "name": palette.name,
        "type": palette.type.value,
        "colors": [c.to_dict() for c in palette.colors],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def palette_to_css(palette: Palette) -> str:
    """A :root block with one 1-indexed custom property per color."""
    lines = [
        f"  --color-{palette.type.value}-{i}: {c.hex};"
        for i, c in enumerate(palette.colors, start=1)
    ]
    return ":root {\n" + "\n".join(lines) + "\n}"


def palette_to_tailwind(palette: Palette) -> str:
    """Tailwind theme extension mapping the palette type to a 100, 200, ... shade ladder."""
    shades = "\n".join(
        f"          {(i + 1) * 100}: '{c.hex}',"
        for i, c in enumerate(palette.colors)
    )
    return (
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {\n"
        "      colors: {\n"
        f"        '{palette.type.value}': {{\n"
        f"{shades}\n"
        "        },\n"
        "      },\n"
        "    },\n"
        "  },\n"
        "}"
    )


_PALETTE_EXPORTERS = {
    "json": palette_to_json,
    "css": palette_to_css,
    "tailwind": palette_to_tailwind,
}


def export_palette(palette: Palette, fmt: ExportFormat) -> str:
    """
    Serialize ``palette`` in the requested format.

    Raises:
        ValueError: For an unknown format
    """
    try:
        exporter = _PALETTE_EXPORTERS[fmt]
    except KeyError:
        raise ValueError(f"Unsupported export format: {fmt!r}") from None
    return exporter(palette)


def export_gradient_css(gradient: Gradient) -> str:
    return f".gradient-{gradient.id} {{\n  background: {gradient.css};\n}}"


def export_gradient_tailwind(gradient: Gradient) -> str:
    """
    ``backgroundImage`` entry rebuilt as a linear gradient from angle and stops.

    Gradients without an angle (radial) fall back to 90°.
    """
    angle = gradient.angle if gradient.angle is not None else 90
    stops = ", ".join(c.hex for c in gradient.colors)
    return (
        "// Add to tailwind.config.js\n"
        "backgroundImage: {\n"
        f"  'gradient-{gradient.id}': 'linear-gradient({angle}deg, {stops})',\n"
        "}"
    )


def export_gradient(gradient: Gradient, fmt: GradientExportFormat) -> str:
    if fmt == "css":
        return export_gradient_css(gradient)
    if fmt == "tailwind":
        return export_gradient_tailwind(gradient)
    raise ValueError(f"Unsupported gradient export format: {fmt!r}")
