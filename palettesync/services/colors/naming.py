"""
Human-readable color names derived from integer HSL.
"""

from typing import List, Tuple

from .model import Color

HUE_NAMES: List[Tuple[int, int, str]] = [
    (0, 15, "Red"),
    (15, 45, "Orange"),
    (45, 70, "Yellow"),
    (70, 150, "Green"),
    (150, 200, "Cyan"),
    (200, 260, "Blue"),
    (260, 320, "Purple"),
    (320, 360, "Pink"),
]

GRAYSCALE_NAMES = {"Black", "Dark Gray", "Gray", "Light Gray", "White"}


def _grayscale_name(lightness: int) -> str:
    if lightness < 20:
        return "Black"
    if lightness < 40:
        return "Dark Gray"
    if lightness < 60:
        return "Gray"
    if lightness < 80:
        return "Light Gray"
    return "White"


def color_name(color: Color) -> str:
    """Basic hue family name, or a gray-scale name for colors below 10% saturation."""
    h, s, l = color.hsl
    if s < 10:
        return _grayscale_name(l)

    for low, high, name in HUE_NAMES:
        if low <= h < high:
            return name
    return "Red"


def descriptive_color_name(color: Color) -> str:
    """
    Hue name with lightness and saturation modifiers, e.g. "Dark Vivid Blue".

    Gray-scale names are returned without modifiers.
    """
    base = color_name(color)
    if base in GRAYSCALE_NAMES:
        return base

    _, s, l = color.hsl
    modifiers = []

    if l < 20:
        modifiers.append("Very Dark")
    elif l < 40:
        modifiers.append("Dark")
    elif l > 85:
        modifiers.append("Very Light")
    elif l > 70:
        modifiers.append("Light")

    # Saturation only reads as a distinct quality in the mid lightness band
    if 20 <= l <= 70:
        if s < 20:
            modifiers.append("Muted")
        elif s > 80:
            modifiers.append("Vivid")

    return f"{' '.join(modifiers)} {base}" if modifiers else base
