"""
Color value type and colorimetric conversions.

A Color carries three synchronized representations of the same sRGB value:
lowercase ``#rrggbb`` hex, 8-bit rgb channels and integer hsl (degrees,
percent, percent). HSL transforms operate on the exact floating HSL of the
rgb channels; the integer hsl triple is display data.
"""

import colorsys
import math
import re
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, Tuple

HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")

RGB = Tuple[int, int, int]


class ColorFormatError(ValueError):
    """Malformed hex string or out-of-range channel value."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 rounding away from negative infinity."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _validate_channel(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ColorFormatError(f"Channel {name} must be an integer, got {value!r}")
    value = int(value)
    if not 0 <= value <= 255:
        raise ColorFormatError(f"Channel {name} out of range 0..255: {value}")
    return value


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """
    Convert 8-bit RGB to integer HSL.

    Returns:
        (h, s, l) with h in [0, 360) degrees and s, l in [0, 100] percent.
        Achromatic colors (saturation rounding to 0) get hue 0.
    """
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    s_pct = round_half_up(s * 100)
    l_pct = round_half_up(l * 100)
    if s_pct == 0:
        return 0, 0, l_pct
    return round_half_up(h * 360) % 360, s_pct, l_pct


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as canonical lowercase #rrggbb."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse #RRGGBB (either case) into an RGB tuple.

    Raises:
        ColorFormatError: If the string is not '#' followed by six hex digits
    """
    if not isinstance(hex_color, str) or not HEX_RE.fullmatch(hex_color):
        raise ColorFormatError(f"Invalid hex color format: {hex_color!r}")
    return tuple(int(hex_color[i:i + 2], 16) for i in (1, 3, 5))


@dataclass(frozen=True)
class Color:
    """Immutable sRGB color with hex, rgb and hsl views."""
    hex: str
    rgb: RGB
    hsl: Tuple[int, int, int]  # (h degrees, s %, l %)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        r = _validate_channel("r", r)
        g = _validate_channel("g", g)
        b = _validate_channel("b", b)
        return cls(hex=rgb_to_hex(r, g, b), rgb=(r, g, b), hsl=rgb_to_hsl(r, g, b))

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        return cls.from_rgb(*hex_to_rgb(hex_color))

    @classmethod
    def from_hls(cls, h: float, l: float, s: float) -> "Color":
        """Build from fractional HLS (all components in [0, 1]), rounding channels half up."""
        channels = colorsys.hls_to_rgb(h % 1.0, clamp(l, 0.0, 1.0), clamp(s, 0.0, 1.0))
        r, g, b = (int(clamp(round_half_up(c * 255), 0, 255)) for c in channels)
        return cls.from_rgb(r, g, b)

    @property
    def hls(self) -> Tuple[float, float, float]:
        """Exact fractional (h, l, s) of the rgb channels."""
        r, g, b = self.rgb
        return colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)

    @property
    def hue(self) -> int:
        return self.hsl[0]

    @property
    def saturation(self) -> int:
        return self.hsl[1]

    @property
    def lightness(self) -> int:
        return self.hsl[2]

    def to_dict(self) -> Dict[str, Any]:
        r, g, b = self.rgb
        h, s, l = self.hsl
        return {
            "hex": self.hex,
            "rgb": {"r": r, "g": g, "b": b},
            "hsl": {"h": h, "s": s, "l": l},
        }


BLACK = Color.from_rgb(0, 0, 0)
WHITE = Color.from_rgb(255, 255, 255)


def rotate_hue(color: Color, degrees: float) -> Color:
    """
    Rotate hue by a signed number of degrees, wrapping modulo 360.

    Saturation and lightness are preserved. An achromatic color stays gray.
    """
    h, l, s = color.hls
    return Color.from_hls((h + degrees / 360.0) % 1.0, l, s)


def with_lightness(color: Color, lightness: float) -> Color:
    """Replace lightness with ``lightness`` (fraction, clamped to [0, 1]), keeping hue and saturation."""
    h, _, s = color.hls
    return Color.from_hls(h, clamp(lightness, 0.0, 1.0), s)


def color_distance(c1: RGB, c2: RGB) -> float:
    """Euclidean distance between two RGB triples."""
    return math.dist(c1, c2)
