"""
CSS gradient descriptors and perceptual two-color interpolation.

Smooth gradients interpolate linearly in CIE L*a*b* (D65) and convert back
to 8-bit sRGB; the end points are reproduced exactly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from palettesync.utils.ids import TokenFactory, timestamp_token

from .model import Color

DEFAULT_ANGLES: Tuple[int, ...] = (0, 45, 90, 135, 180)
DEFAULT_SMOOTH_STEPS = 5


class GradientType(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"


@dataclass(frozen=True)
class Gradient:
    """A rendered CSS gradient over an ordered list of color stops."""
    id: str
    name: str
    type: GradientType
    colors: Tuple[Color, ...]
    css: str
    angle: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "colors": [c.to_dict() for c in self.colors],
            "css": self.css,
            "angle": self.angle,
        }


def _color_stops(colors: Sequence[Color]) -> str:
    return ", ".join(c.hex for c in colors)


def linear_gradient(
    colors: Sequence[Color],
    angle: int = 90,
    token_factory: TokenFactory = timestamp_token,
) -> Gradient:
    """Linear gradient at ``angle`` degrees through ``colors`` in order."""
    return Gradient(
        id=f"linear-{angle}-{token_factory()}",
        name=f"Linear Gradient ({angle}°)",
        type=GradientType.LINEAR,
        colors=tuple(colors),
        css=f"linear-gradient({angle}deg, {_color_stops(colors)})",
        angle=angle,
    )


def radial_gradient(
    colors: Sequence[Color],
    token_factory: TokenFactory = timestamp_token,
) -> Gradient:
    """Circular radial gradient from the center outwards through ``colors``."""
    return Gradient(
        id=f"radial-{token_factory()}",
        name="Radial Gradient",
        type=GradientType.RADIAL,
        colors=tuple(colors),
        css=f"radial-gradient(circle, {_color_stops(colors)})",
    )


def rgb_to_lab(rgb: Tuple[int, int, int]) -> np.ndarray:
    """8-bit sRGB to CIE L*a*b* under D65 (L in [0, 100])."""
    pixel = (np.asarray(rgb, dtype=np.float32) / np.float32(255.0)).reshape(1, 1, 3)
    return cv2.cvtColor(pixel, cv2.COLOR_RGB2LAB).reshape(3).astype(np.float64)


def lab_to_rgb(lab: np.ndarray) -> Tuple[int, int, int]:
    """CIE L*a*b* (D65) to 8-bit sRGB, clipped into gamut and rounded half up."""
    pixel = np.asarray(lab, dtype=np.float32).reshape(1, 1, 3)
    srgb = cv2.cvtColor(pixel, cv2.COLOR_LAB2RGB).reshape(3).astype(np.float64) * 255.0
    r, g, b = (int(v) for v in np.clip(np.floor(srgb + 0.5), 0, 255))
    return r, g, b


def smooth_gradient(start: Color, end: Color, steps: int = DEFAULT_SMOOTH_STEPS) -> List[Color]:
    """
    Interpolate ``steps`` colors from ``start`` to ``end`` in Lab space.

    Returns:
        ``steps`` colors; the first is ``start`` and the last is ``end``.
        ``steps`` of 1 yields ``[start]`` and ``steps`` below 1 yields [].
    """
    if steps < 1:
        return []
    if steps == 1:
        return [start]

    lab_start = rgb_to_lab(start.rgb)
    lab_end = rgb_to_lab(end.rgb)

    colors = [start]
    for t in np.linspace(0.0, 1.0, steps)[1:-1]:
        colors.append(Color.from_rgb(*lab_to_rgb(lab_start + (lab_end - lab_start) * t)))
    colors.append(end)
    return colors


def generate_all_gradients(
    colors: Sequence[Color],
    token_factory: TokenFactory = timestamp_token,
    angles: Sequence[int] = DEFAULT_ANGLES,
    smooth_steps: int = DEFAULT_SMOOTH_STEPS,
) -> List[Gradient]:
    """
    Standard gradient set for a color list.

    Linear gradients at each of ``angles`` over all colors, one radial
    gradient over all colors, then a 90° linear gradient over a smooth
    interpolation between the first two colors. Fewer than two colors
    yields an empty list.
    """
    if len(colors) < 2:
        return []

    gradients = [linear_gradient(colors, angle, token_factory) for angle in angles]
    gradients.append(radial_gradient(colors, token_factory))
    smooth = smooth_gradient(colors[0], colors[1], smooth_steps)
    gradients.append(linear_gradient(smooth, 90, token_factory))
    return gradients
