"""
PaletteSync API Schemas
Pydantic models for extraction, palette, gradient, contrast and export
request/response validation.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"

PaletteTypeName = Literal[
    "complementary", "analogous", "triadic", "monochromatic", "split-complementary"
]


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("palettesync", description="Service name")


# ============================================================================
# COLOR SCHEMAS
# ============================================================================

class RGBModel(BaseModel):
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLModel(BaseModel):
    h: int = Field(..., ge=0, lt=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation percent")
    l: int = Field(..., ge=0, le=100, description="Lightness percent")


class ColorModel(BaseModel):
    """A color in all three representations."""
    hex: str = Field(..., pattern=HEX_PATTERN, description="Lowercase hex color #rrggbb")
    rgb: RGBModel
    hsl: HSLModel
    name: Optional[str] = Field(None, description="Descriptive color name")


class ColorIn(BaseModel):
    """Color reference in requests; only the hex value is read."""
    hex: str = Field(..., pattern=HEX_PATTERN, description="Hex color code #RRGGBB")


# ============================================================================
# PALETTE / GRADIENT SCHEMAS
# ============================================================================

class PaletteModel(BaseModel):
    """Scored palette produced by one harmony strategy."""
    id: str
    name: str
    type: PaletteTypeName
    colors: List[ColorModel]
    score: int = Field(..., ge=0, le=100)
    reason: str
    contrast_issues: List[str] = Field(default_factory=list)


class PaletteIn(BaseModel):
    """Palette as sent back by a client for saving or export."""
    id: str = Field(..., min_length=1, max_length=128)
    name: Optional[str] = None
    type: PaletteTypeName
    colors: List[ColorIn] = Field(..., min_length=1, max_length=32)
    score: int = Field(0, ge=0, le=100)
    reason: str = ""
    contrast_issues: List[str] = Field(default_factory=list)


class GradientModel(BaseModel):
    id: str
    name: str
    type: Literal["linear", "radial"]
    colors: List[ColorModel]
    css: str
    angle: Optional[int] = None


class GradientIn(BaseModel):
    id: str = Field(..., min_length=1, max_length=128)
    name: Optional[str] = None
    type: Literal["linear", "radial"]
    colors: List[ColorIn] = Field(..., min_length=1, max_length=64)
    angle: Optional[int] = Field(None, ge=0, le=360)


class AnalysisResponse(BaseModel):
    """Extraction/generation result."""
    request_id: str
    colors: List[ColorModel]
    palettes: List[PaletteModel]
    gradients: List[GradientModel]


class GradientsResponse(BaseModel):
    gradients: List[GradientModel]


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================

class ColorsRequest(BaseModel):
    """Seed colors for palette or gradient generation."""
    colors: List[str] = Field(
        ...,
        max_length=20,
        description="Hex colors, most dominant first"
    )


class ReplaceColorRequest(BaseModel):
    """Manual edit of one extracted color."""
    colors: List[str] = Field(..., min_length=1, max_length=20)
    index: int = Field(..., ge=0)
    hex: str = Field(..., pattern=HEX_PATTERN)


class SavePaletteRequest(BaseModel):
    palette: PaletteIn


class ContrastRequest(BaseModel):
    foreground: str = Field(..., pattern=HEX_PATTERN)
    background: str = Field(..., pattern=HEX_PATTERN)


class ContrastResponse(BaseModel):
    ratio: float = Field(..., ge=1.0, description="WCAG contrast ratio, 1 to 21")
    meets_aa: bool
    meets_aaa: bool
    best_text_color: str = Field(..., description="Best text color (black or white) for the background")


class PaletteExportRequest(BaseModel):
    palette: PaletteIn
    format: Literal["json", "css", "tailwind"]


class GradientExportRequest(BaseModel):
    gradient: GradientIn
    format: Literal["css", "tailwind"]


class ExportResponse(BaseModel):
    format: str
    content: str


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")
