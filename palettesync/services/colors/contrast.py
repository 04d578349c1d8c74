"""
WCAG 2.0 contrast math.

Relative luminance uses the sRGB linearization with the 0.03928 knee and the
Rec. 709 channel weights.
"""

from .model import BLACK, WHITE, Color

AA_NORMAL_TEXT = 4.5
AAA_NORMAL_TEXT = 7.0


def _linearize(channel: int) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    r, g, b = (_linearize(c) for c in color.rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(color_a: Color, color_b: Color) -> float:
    """Contrast ratio between 1.0 and 21.0, symmetric in its arguments."""
    la = relative_luminance(color_a)
    lb = relative_luminance(color_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def meets_aa(color_a: Color, color_b: Color) -> bool:
    return contrast_ratio(color_a, color_b) >= AA_NORMAL_TEXT


def meets_aaa(color_a: Color, color_b: Color) -> bool:
    return contrast_ratio(color_a, color_b) >= AAA_NORMAL_TEXT


def best_text_color(background: Color) -> Color:
    """White if it contrasts more with ``background`` than black does, else black."""
    if contrast_ratio(background, WHITE) > contrast_ratio(background, BLACK):
        return WHITE
    return BLACK
