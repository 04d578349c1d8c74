"""
PaletteSync Pipeline Orchestrator

Coordinates pixel quantization, duplicate suppression, palette generation
and gradient generation. Every call recomputes from scratch; results are
plain values with no shared state.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from loguru import logger

from palettesync.config import config
from palettesync.utils.ids import TokenFactory, timestamp_token

from .colors.dedupe import remove_duplicates
from .colors.gradients import Gradient, generate_all_gradients
from .colors.harmony import Palette
from .colors.harmony.orchestrator import generate_all_palettes
from .colors.model import Color
from .colors.naming import descriptive_color_name
from .colors.quantizer import PixelBuffer, quantize_pixels
from .imaging import load_working_image
from .observability import performance_monitor


@dataclass(frozen=True)
class AnalysisResult:
    """Extracted colors with the palettes and gradients derived from them."""
    colors: List[Color]
    palettes: List[Palette]
    gradients: List[Gradient]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "colors": [dict(c.to_dict(), name=descriptive_color_name(c)) for c in self.colors],
            "palettes": [p.to_dict() for p in self.palettes],
            "gradients": [g.to_dict() for g in self.gradients],
        }


def extract_colors(
    pixels: PixelBuffer,
    width: int,
    height: int,
    max_colors: Optional[int] = None,
    threshold: Optional[float] = None,
) -> List[Color]:
    """
    Extract up to ``max_colors`` dominant, mutually distinct colors from an RGBA8 buffer.

    Args:
        pixels: RGBA8 buffer already reduced to the working resolution
        width: Buffer width in pixels
        height: Buffer height in pixels
        max_colors: Number of colors to keep (default from config)
        threshold: Minimum RGB distance between kept colors (default from config)

    Returns:
        Colors ordered by pixel frequency; fewer than ``max_colors`` for
        low-variety images and empty for fully transparent ones
    """
    if max_colors is None:
        max_colors = config.MAX_EXTRACTED_COLORS
    if threshold is None:
        threshold = config.DEDUP_THRESHOLD

    with performance_monitor("quantization", item_count=width * height):
        ranked = quantize_pixels(
            pixels, width, height,
            step=config.QUANT_STEP,
            alpha_threshold=config.ALPHA_THRESHOLD,
            top_n=config.TOP_BUCKETS,
        )

    with performance_monitor("deduplication", item_count=len(ranked)):
        unique = remove_duplicates(ranked, threshold)

    colors = [Color.from_rgb(*rgb) for rgb in unique[:max_colors]]
    logger.info(f"Extracted {len(colors)} colors from {len(ranked)} buckets: {[c.hex for c in colors]}")
    return colors


def analyze_colors(
    colors: Sequence[Color],
    token_factory: TokenFactory = timestamp_token,
) -> AnalysisResult:
    """Generate scored palettes and the gradient set for a color list."""
    colors = list(colors)

    with performance_monitor("palette_generation", item_count=len(colors)):
        palettes = generate_all_palettes(colors)

    with performance_monitor("gradient_generation", item_count=len(colors)):
        gradients = generate_all_gradients(
            colors,
            token_factory=token_factory,
            angles=config.GRADIENT_ANGLES,
            smooth_steps=config.SMOOTH_STEPS,
        )

    return AnalysisResult(colors=colors, palettes=palettes, gradients=gradients)


def analyze_pixels(
    pixels: PixelBuffer,
    width: int,
    height: int,
    token_factory: TokenFactory = timestamp_token,
    max_colors: Optional[int] = None,
    threshold: Optional[float] = None,
) -> AnalysisResult:
    """Full pipeline from a working-resolution RGBA8 buffer."""
    colors = extract_colors(pixels, width, height, max_colors=max_colors, threshold=threshold)
    return analyze_colors(colors, token_factory)


def analyze_image_bytes(
    file_bytes: bytes,
    token_factory: TokenFactory = timestamp_token,
    max_colors: Optional[int] = None,
    threshold: Optional[float] = None,
) -> AnalysisResult:
    """Decode an encoded image, reduce it to working size and run the full pipeline."""
    with performance_monitor("image_decoding"):
        rgba: np.ndarray = load_working_image(file_bytes)

    height, width = rgba.shape[:2]
    logger.debug(f"Working image {width}x{height}")
    return analyze_pixels(rgba, width, height, token_factory, max_colors, threshold)


def replace_color(colors: Sequence[Color], index: int, hex_color: str) -> List[Color]:
    """
    New color list with the color at ``index`` replaced by ``hex_color``.

    Raises:
        IndexError: If ``index`` is outside the list
        ColorFormatError: If ``hex_color`` is malformed
    """
    if not 0 <= index < len(colors):
        raise IndexError(f"Color index {index} out of range for {len(colors)} colors")
    updated = list(colors)
    updated[index] = Color.from_hex(hex_color)
    return updated
