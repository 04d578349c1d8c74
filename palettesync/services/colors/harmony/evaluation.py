"""
Palette quality scoring.

Starts from 100 and applies three independent deductions: lightness spread,
share of color pairs meeting WCAG AA, and average saturation. Each criterion
contributes either one issue or one positive rationale.
"""

from dataclasses import dataclass, field
from itertools import combinations
from typing import List, Sequence

from ..contrast import meets_aa
from ..model import Color, round_half_up

MIN_LIGHTNESS_RANGE = 30
POOR_CONTRAST_SHARE = 0.3
MODERATE_CONTRAST_SHARE = 0.5
LOW_SATURATION = 20
HIGH_SATURATION = 80

FALLBACK_REASON = "Standard color harmony"


@dataclass
class PaletteEvaluation:
    """Transient scoring result folded into a Palette."""
    score: int
    issues: List[str] = field(default_factory=list)
    reason: str = FALLBACK_REASON


def aa_pass_share(colors: Sequence[Color]) -> float:
    """Share of unordered color pairs meeting WCAG AA; 0 with fewer than two colors."""
    pairs = list(combinations(colors, 2))
    if not pairs:
        return 0.0
    passing = sum(1 for a, b in pairs if meets_aa(a, b))
    return passing / len(pairs)


def evaluate_palette(colors: Sequence[Color]) -> PaletteEvaluation:
    """
    Score a palette in [0, 100] and explain the result.

    Args:
        colors: Palette colors in display order (may be empty)

    Returns:
        PaletteEvaluation with the clamped score, ordered issues and the
        comma-joined positive rationales
    """
    score = 100
    issues: List[str] = []
    reasons: List[str] = []

    # Lightness spread
    lightness = [c.lightness for c in colors]
    lightness_range = max(lightness) - min(lightness) if lightness else 0
    if lightness_range < MIN_LIGHTNESS_RANGE:
        score -= 20
        issues.append("Limited lightness range - may lack visual hierarchy")
    else:
        reasons.append("Good lightness range for visual hierarchy")

    # Pairwise contrast
    share = aa_pass_share(colors)
    if share < POOR_CONTRAST_SHARE:
        score -= 30
        issues.append("Poor contrast - many color pairs fail WCAG AA")
    elif share < MODERATE_CONTRAST_SHARE:
        score -= 15
        issues.append("Moderate contrast - some pairs may be hard to read")
    else:
        pct = round_half_up(share * 100)
        reasons.append(f"Excellent contrast ({pct}% of pairs meet WCAG AA)")

    # Saturation balance
    saturations = [c.saturation for c in colors]
    avg_saturation = sum(saturations) / len(saturations) if saturations else 0
    if avg_saturation < LOW_SATURATION:
        score -= 10
        issues.append("Low saturation - colors may appear dull")
    elif avg_saturation > HIGH_SATURATION:
        score -= 10
        issues.append("Very high saturation - may be overwhelming")
    else:
        reasons.append("Balanced saturation levels")

    return PaletteEvaluation(
        score=max(0, score),
        issues=issues,
        reason=", ".join(reasons) if reasons else FALLBACK_REASON,
    )
