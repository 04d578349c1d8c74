"""
PaletteSync FastAPI application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from palettesync import __version__
from palettesync.api.v1 import router as v1_router
from palettesync.config import config
from palettesync.schemas import HealthResponse

app = FastAPI(
    title="PaletteSync",
    description="Color extraction, harmony palettes and gradients from images",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=__version__)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "PaletteSync API",
        "version": __version__,
        "docs": "/docs"
    }
