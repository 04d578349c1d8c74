"""
PaletteSync v1 API Routes
Image extraction, palette generation, gradients, contrast checks and exports.
"""
import dataclasses
from typing import Any, Dict, List, Optional, Sequence

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from palettesync.config import config
from palettesync.schemas import (
    AnalysisResponse,
    ColorIn,
    ColorsRequest,
    ContrastRequest,
    ContrastResponse,
    ErrorResponse,
    ExportResponse,
    GradientExportRequest,
    GradientsResponse,
    PaletteExportRequest,
    PaletteIn,
    PaletteModel,
    ReplaceColorRequest,
    SavePaletteRequest,
)
from palettesync.services import pipeline
from palettesync.services.colors import contrast
from palettesync.services.colors.export import export_gradient, export_palette
from palettesync.services.colors.gradients import (
    Gradient,
    GradientType,
    generate_all_gradients,
    linear_gradient,
    radial_gradient,
)
from palettesync.services.colors.harmony import Palette, PaletteType
from palettesync.services.colors.harmony.orchestrator import generate_all_palettes, snapshot_palette
from palettesync.services.colors.model import Color
from palettesync.services.imaging import read_upload
from palettesync.services.observability import get_metrics_collector
from palettesync.utils.ids import generate_request_id
from palettesync.utils.logging import logger

router = APIRouter(prefix="/v1", tags=["PaletteSync v1"])

BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid colors or parameters"}}
UPLOAD_ERRORS = {
    **BAD_REQUEST,
    413: {"model": ErrorResponse, "description": "File too large"},
    415: {"model": ErrorResponse, "description": "Unsupported media type"},
}


def _parse_colors(hex_colors: Sequence[str]) -> List[Color]:
    try:
        return [Color.from_hex(h) for h in hex_colors]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _palette_from_request(body: PaletteIn) -> Palette:
    palette_type = PaletteType(body.type)
    return Palette(
        id=body.id,
        name=body.name or palette_type.display_name,
        type=palette_type,
        colors=tuple(_parse_colors([c.hex for c in body.colors])),
        score=body.score,
        reason=body.reason,
        contrast_issues=tuple(body.contrast_issues),
    )


def _gradient_from_request(gradient_id: str, gradient_type: str, colors: List[ColorIn], angle) -> Gradient:
    stops = _parse_colors([c.hex for c in colors])
    if GradientType(gradient_type) is GradientType.RADIAL:
        gradient = radial_gradient(stops, token_factory=lambda: "")
    else:
        gradient = linear_gradient(stops, angle if angle is not None else 90, token_factory=lambda: "")
    return dataclasses.replace(gradient, id=gradient_id)


def _analysis_response(request_id: str, result: pipeline.AnalysisResult) -> Dict[str, Any]:
    return {"request_id": request_id, **result.to_dict()}


@router.post("/extract", response_model=AnalysisResponse,
             responses=UPLOAD_ERRORS,
             summary="Extract colors from an image",
             description="Dominant colors, scored palettes and gradients for an uploaded image")
async def extract(
    file: UploadFile = File(..., description="PNG, JPEG or WebP image"),
    max_colors: Optional[int] = Query(None, description="Number of colors to extract"),
    threshold: Optional[float] = Query(None, description="Minimum RGB distance between extracted colors"),
):
    request_id = generate_request_id("extract")

    if max_colors is not None and not config.validate_max_colors(max_colors):
        raise HTTPException(status_code=400, detail=f"max_colors must be between 1 and {config.TOP_BUCKETS}")
    if threshold is not None and not config.validate_threshold(threshold):
        raise HTTPException(status_code=400, detail="threshold must be between 0 and 442")

    logger.info("Starting extraction", extra={"request_id": request_id, "upload_name": file.filename})

    file_bytes = await read_upload(file)
    try:
        result = pipeline.analyze_image_bytes(file_bytes, max_colors=max_colors, threshold=threshold)
    except ValueError as e:
        logger.warning(f"Extraction rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Extraction complete", extra={
        "request_id": request_id,
        "colors": len(result.colors),
        "palettes": len(result.palettes),
    })
    return _analysis_response(request_id, result)


@router.post("/palettes", response_model=AnalysisResponse,
             responses=BAD_REQUEST,
             summary="Generate palettes from colors",
             description="Regenerate palettes and gradients from a color list (first color is the seed)")
def generate_palettes(body: ColorsRequest):
    request_id = generate_request_id("palettes")
    colors = _parse_colors(body.colors)
    result = pipeline.analyze_colors(colors)
    logger.info("Palettes generated", extra={"request_id": request_id, "seed_count": len(colors)})
    return _analysis_response(request_id, result)


@router.post("/palettes/replace", response_model=AnalysisResponse,
             responses=BAD_REQUEST,
             summary="Replace one color and regenerate")
def replace_palette_color(body: ReplaceColorRequest):
    request_id = generate_request_id("replace")
    colors = _parse_colors(body.colors)
    try:
        updated = pipeline.replace_color(colors, body.index, body.hex)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Color replaced", extra={"request_id": request_id, "index": body.index, "hex": body.hex})
    return _analysis_response(request_id, pipeline.analyze_colors(updated))


@router.post("/palettes/save", response_model=PaletteModel, responses=BAD_REQUEST,
             summary="Snapshot a palette under a fresh saved identity")
def save_palette(body: SavePaletteRequest):
    saved = snapshot_palette(_palette_from_request(body.palette))
    logger.info("Palette snapshot created", extra={"source_id": body.palette.id, "saved_id": saved.id})
    return saved.to_dict()


@router.post("/gradients", response_model=GradientsResponse, responses=BAD_REQUEST,
             summary="Generate gradients from colors")
def gradients(body: ColorsRequest):
    colors = _parse_colors(body.colors)
    return {"gradients": [g.to_dict() for g in generate_all_gradients(colors)]}


@router.post("/contrast", response_model=ContrastResponse, responses=BAD_REQUEST,
             summary="WCAG contrast check")
def check_contrast(body: ContrastRequest):
    foreground, background = _parse_colors([body.foreground, body.background])
    return ContrastResponse(
        ratio=contrast.contrast_ratio(foreground, background),
        meets_aa=contrast.meets_aa(foreground, background),
        meets_aaa=contrast.meets_aaa(foreground, background),
        best_text_color=contrast.best_text_color(background).hex,
    )


@router.post("/export/palette", response_model=ExportResponse, responses=BAD_REQUEST,
             summary="Export a palette")
def export_palette_route(body: PaletteExportRequest):
    palette = _palette_from_request(body.palette)
    return ExportResponse(format=body.format, content=export_palette(palette, body.format))


@router.post("/export/gradient", response_model=ExportResponse, responses=BAD_REQUEST,
             summary="Export a gradient")
def export_gradient_route(body: GradientExportRequest):
    g = body.gradient
    gradient = _gradient_from_request(g.id, g.type, g.colors, g.angle)
    return ExportResponse(format=body.format, content=export_gradient(gradient, body.format))


@router.get("/metrics", summary="Pipeline stage metrics")
def metrics():
    collector = get_metrics_collector()
    return {
        "stats": collector.get_all_stats(),
        "recent": collector.get_recent_metrics(limit=20),
    }
