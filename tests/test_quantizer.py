"""
Unit tests for the frequency quantizer and duplicate suppression.
"""
import numpy as np
import pytest

from palettesync.services.colors.dedupe import remove_duplicates
from palettesync.services.colors.model import ColorFormatError
from palettesync.services.colors.quantizer import quantize_pixels


def rgba_buffer(pixels):
    """Flatten a list of (r, g, b, a) tuples into a bytes buffer."""
    return bytes(channel for pixel in pixels for channel in pixel)


class TestQuantizePixels:
    """Test quantization grid, alpha filtering and ranking"""

    def test_transparent_pixels_are_ignored(self):
        pixels = [(255, 0, 0, 255), (0, 255, 0, 0), (255, 0, 0, 255), (0, 255, 0, 0)]
        result = quantize_pixels(rgba_buffer(pixels), 2, 2)
        # 255 rounds to 260 on the grid and is clamped back into range
        assert result == [(255, 0, 0)]

    def test_alpha_threshold_boundary(self):
        pixels = [(0, 0, 255, 128), (255, 0, 0, 127)]
        assert quantize_pixels(rgba_buffer(pixels), 2, 1) == [(0, 0, 255)]

    def test_rounds_half_up_to_grid(self):
        pixels = [(245, 5, 4, 255)]
        assert quantize_pixels(rgba_buffer(pixels), 1, 1) == [(250, 10, 0)]

    def test_255_and_250_stay_distinct(self):
        pixels = [(255, 0, 0, 255), (255, 0, 0, 255), (250, 0, 0, 255)]
        assert quantize_pixels(rgba_buffer(pixels), 3, 1) == [(255, 0, 0), (250, 0, 0)]

    def test_ranked_by_frequency(self):
        pixels = [(200, 0, 0, 255)] + [(0, 0, 200, 255)] * 3
        assert quantize_pixels(rgba_buffer(pixels), 4, 1) == [(0, 0, 200), (200, 0, 0)]

    def test_ties_keep_first_seen_order(self):
        green, red = (0, 200, 0, 255), (200, 0, 0, 255)
        pixels = [red, green, red, green]
        # red sorts after green by value but was seen first
        assert quantize_pixels(rgba_buffer(pixels), 2, 2) == [(200, 0, 0), (0, 200, 0)]

    def test_top_n_limit(self):
        pixels = [(i * 10, 0, 0, 255) for i in range(25)]
        result = quantize_pixels(rgba_buffer(pixels), 25, 1)
        assert result == [(i * 10, 0, 0) for i in range(20)]

    def test_accepts_numpy_image(self):
        img = np.zeros((10, 20, 4), dtype=np.uint8)
        img[..., 2] = 200
        img[..., 3] = 255
        assert quantize_pixels(img, 20, 10) == [(0, 0, 200)]

    def test_all_transparent(self):
        img = np.zeros((4, 4, 4), dtype=np.uint8)
        assert quantize_pixels(img, 4, 4) == []

    def test_empty_image(self):
        assert quantize_pixels(b"", 0, 0) == []

    def test_buffer_size_mismatch(self):
        with pytest.raises(ColorFormatError):
            quantize_pixels(bytes(15), 2, 2)

    def test_rejects_non_uint8_array(self):
        with pytest.raises(ColorFormatError):
            quantize_pixels(np.zeros((2, 2, 4), dtype=np.float32), 2, 2)

    def test_deterministic(self):
        rng = np.random.default_rng(42)
        img = rng.integers(0, 256, size=(50, 50, 4), dtype=np.uint8)
        assert quantize_pixels(img, 50, 50) == quantize_pixels(img.copy(), 50, 50)


class TestRemoveDuplicates:
    """Test greedy near-duplicate suppression"""

    def test_removes_close_colors(self):
        colors = [(255, 0, 0), (250, 10, 0), (0, 0, 255)]
        assert remove_duplicates(colors) == [(255, 0, 0), (0, 0, 255)]

    def test_distance_equal_to_threshold_is_kept(self):
        colors = [(0, 0, 0), (30, 40, 0)]
        assert remove_duplicates(colors, threshold=50) == colors

    def test_first_seen_wins(self):
        colors = [(100, 100, 100), (120, 100, 100), (90, 100, 100)]
        assert remove_duplicates(colors) == [(100, 100, 100)]
        assert remove_duplicates(list(reversed(colors))) == [(90, 100, 100)]

    def test_checks_against_every_kept_color(self):
        # Third color is far from the first but close to the second
        colors = [(0, 0, 0), (100, 0, 0), (120, 0, 0)]
        assert remove_duplicates(colors) == [(0, 0, 0), (100, 0, 0)]

    def test_idempotent(self):
        rng = np.random.default_rng(7)
        colors = [tuple(int(c) for c in row) for row in rng.integers(0, 256, size=(40, 3))]
        once = remove_duplicates(colors, threshold=60)
        assert remove_duplicates(once, threshold=60) == once

    def test_empty(self):
        assert remove_duplicates([]) == []
