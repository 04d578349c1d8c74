"""
PaletteSync

Dominant color extraction, color-theory palette generation and gradient
building for uploaded images.
"""

__version__ = "1.0.0"
