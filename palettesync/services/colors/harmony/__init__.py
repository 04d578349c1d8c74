"""
PaletteSync Color Harmony Engine

Color theory rules that turn one seed color into complementary, analogous,
triadic, monochromatic and split-complementary palettes. Every generator is
a pure function of the seed.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from ..model import Color, rotate_hue, with_lightness


class PaletteType(str, Enum):
    """Supported harmony strategies, in declaration (tie-break) order."""
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"
    SPLIT_COMPLEMENTARY = "split-complementary"

    @property
    def display_name(self) -> str:
        return self.value.replace("-", " ").title()


@dataclass(frozen=True)
class Palette:
    """A named, typed and scored group of colors from one harmony strategy."""
    id: str
    name: str
    type: PaletteType
    colors: Tuple[Color, ...]
    score: int
    reason: str
    contrast_issues: Tuple[str, ...] = field(default_factory=tuple)

    def with_id(self, new_id: str) -> "Palette":
        return replace(self, id=new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "colors": [c.to_dict() for c in self.colors],
            "score": self.score,
            "reason": self.reason,
            "contrast_issues": list(self.contrast_issues),
        }


def generate_complementary(seed: Color) -> List[Color]:
    """Seed plus its +180° opposite."""
    return [seed, rotate_hue(seed, 180)]


def generate_analogous(seed: Color) -> List[Color]:
    """Neighbors at -30° and +30° with the seed in the middle."""
    return [rotate_hue(seed, -30), seed, rotate_hue(seed, 30)]


def generate_triadic(seed: Color) -> List[Color]:
    """Three hues evenly spaced 120° apart."""
    return [seed, rotate_hue(seed, 120), rotate_hue(seed, 240)]


def generate_monochromatic(seed: Color) -> List[Color]:
    """
    Lightness ladder at 20/40/70/90% around the seed.

    The seed keeps its own lightness in the middle slot, so the ladder is
    only strictly ascending when the seed lies between 40% and 70%.
    """
    return [
        with_lightness(seed, 0.2),
        with_lightness(seed, 0.4),
        seed,
        with_lightness(seed, 0.7),
        with_lightness(seed, 0.9),
    ]


def generate_split_complementary(seed: Color) -> List[Color]:
    """Seed plus the two hues flanking its complement at +150° and +210°."""
    return [seed, rotate_hue(seed, 150), rotate_hue(seed, 210)]


GENERATORS: Dict[PaletteType, Callable[[Color], List[Color]]] = {
    PaletteType.COMPLEMENTARY: generate_complementary,
    PaletteType.ANALOGOUS: generate_analogous,
    PaletteType.TRIADIC: generate_triadic,
    PaletteType.MONOCHROMATIC: generate_monochromatic,
    PaletteType.SPLIT_COMPLEMENTARY: generate_split_complementary,
}

