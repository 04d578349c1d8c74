"""
PaletteSync Colors Module

Provides the color value type and conversions, pixel quantization,
duplicate suppression, WCAG contrast math, color naming, gradients and
export formatting. Palette generation lives in the harmony subpackage.
"""

__version__ = "1.0.0"
