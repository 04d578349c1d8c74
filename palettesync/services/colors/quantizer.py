"""
Frequency quantizer for RGBA pixel buffers.

Snaps every sufficiently opaque pixel onto a coarse RGB grid and ranks grid
buckets by how many pixels fell into them.
"""

from typing import List, Tuple, Union

import numpy as np
from loguru import logger

from .model import ColorFormatError

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray]


def _as_rgba_rows(pixels: PixelBuffer, width: int, height: int) -> np.ndarray:
    """Validate the buffer size and view it as (N, 4) uint8 rows."""
    if width < 0 or height < 0:
        raise ColorFormatError(f"Invalid dimensions: {width}x{height}")

    if isinstance(pixels, np.ndarray):
        if pixels.dtype != np.uint8:
            raise ColorFormatError(f"Pixel array must be uint8, got {pixels.dtype}")
        flat = pixels.reshape(-1)
    else:
        flat = np.frombuffer(bytes(pixels), dtype=np.uint8)

    expected = width * height * 4
    if flat.size != expected:
        raise ColorFormatError(
            f"Pixel buffer has {flat.size} bytes, expected {expected} for {width}x{height} RGBA"
        )
    return flat.reshape(-1, 4)


def quantize_pixels(
    pixels: PixelBuffer,
    width: int,
    height: int,
    step: int = 10,
    alpha_threshold: int = 128,
    top_n: int = 20,
) -> List[Tuple[int, int, int]]:
    """
    Rank quantized colors of an interleaved RGBA8 buffer by frequency.

    Args:
        pixels: Flat RGBA8 buffer, or a uint8 array of shape (height, width, 4)
        width: Image width in pixels
        height: Image height in pixels
        step: Grid spacing; each channel is rounded half up to a multiple of it
        alpha_threshold: Pixels with alpha below this are ignored
        top_n: Maximum number of buckets returned

    Returns:
        Up to ``top_n`` RGB triples ordered by descending pixel count. Equal
        counts keep the order in which the bucket was first seen.

    Raises:
        ColorFormatError: If the buffer size does not match width*height*4
    """
    rows = _as_rgba_rows(pixels, width, height)
    opaque = rows[rows[:, 3] >= alpha_threshold, :3]
    logger.debug(f"Quantizing {len(opaque)}/{len(rows)} opaque pixels, step={step}")

    if opaque.size == 0:
        return []

    buckets = np.floor(opaque.astype(np.float64) / step + 0.5).astype(np.int64) * step
    # 255 lands on 260 for step 10; keep it a distinct bucket inside the 8-bit range
    buckets = np.minimum(buckets, 255)

    keys, first_seen, counts = np.unique(
        buckets, axis=0, return_index=True, return_counts=True
    )
    # lexsort uses the last key as primary: count desc, then first occurrence asc
    order = np.lexsort((first_seen, -counts))[:top_n]

    ranked = [tuple(int(c) for c in keys[i]) for i in order]
    logger.debug(f"Quantizer kept {len(ranked)} of {len(keys)} buckets")
    return ranked
