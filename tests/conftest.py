"""
Test configuration and fixtures for PaletteSync tests.
"""
import io

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from palettesync.main import app
from palettesync.utils.ids import SequentialTokens


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from palettesync.services.observability import reset_metrics
    reset_metrics()


@pytest.fixture
def tokens():
    """Deterministic identifier source."""
    return SequentialTokens()


def encode_png(array: np.ndarray) -> bytes:
    """Encode an RGB or RGBA uint8 array as PNG bytes."""
    buffer = io.BytesIO()
    Image.fromarray(array).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def two_block_png():
    """400x100 image, left half pure red and right half pure blue."""
    img = np.zeros((100, 400, 3), dtype=np.uint8)
    img[:, :200] = (255, 0, 0)
    img[:, 200:] = (0, 0, 255)
    return encode_png(img)
