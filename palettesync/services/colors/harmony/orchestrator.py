"""
PaletteSync Palette Orchestrator

Runs every harmony generator over the primary extracted color, scores each
result and returns the palettes best-first. Also mints saved-palette
snapshots.
"""

from typing import List, Sequence

from loguru import logger

from palettesync.utils.ids import TokenFactory, timestamp_token

from . import GENERATORS, Palette, PaletteType
from .evaluation import evaluate_palette
from ..model import Color


def build_palette(palette_type: PaletteType, seed: Color) -> Palette:
    """Generate and score one palette of ``palette_type`` from ``seed``."""
    colors = GENERATORS[palette_type](seed)
    evaluation = evaluate_palette(colors)
    return Palette(
        id=palette_type.value,
        name=palette_type.display_name,
        type=palette_type,
        colors=tuple(colors),
        score=evaluation.score,
        reason=evaluation.reason,
        contrast_issues=tuple(evaluation.issues),
    )


def generate_all_palettes(extracted_colors: Sequence[Color]) -> List[Palette]:
    """
    Generate one palette per harmony type from the first extracted color.

    Args:
        extracted_colors: Extracted or edited colors; only the first is used as seed

    Returns:
        Palettes sorted by descending score. Ties keep declaration order
        (complementary, analogous, triadic, monochromatic, split-complementary).
        Empty input yields an empty list.
    """
    if not extracted_colors:
        logger.debug("No seed color supplied, skipping palette generation")
        return []

    seed = extracted_colors[0]
    palettes = [build_palette(palette_type, seed) for palette_type in PaletteType]
    palettes.sort(key=lambda p: -p.score)

    logger.info(
        f"Generated {len(palettes)} palettes from seed {seed.hex}: "
        f"{[(p.id, p.score) for p in palettes]}"
    )
    return palettes


def snapshot_palette(palette: Palette, token_factory: TokenFactory = timestamp_token) -> Palette:
    """Copy of ``palette`` under a fresh ``saved-<token>`` identity."""
    return palette.with_id(f"saved-{token_factory()}")
