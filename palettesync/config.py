"""
PaletteSync Configuration
Manages environment variables and defaults for the extraction and palette services.
"""
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration class for PaletteSync services."""

    # Upload limits
    MAX_FILE_MB: int = int(os.environ.get("PALETTESYNC_MAX_FILE_MB", "10"))
    MAX_IMAGE_PIXELS: int = int(os.environ.get("PALETTESYNC_MAX_IMAGE_PIXELS", "40000000"))

    # Working resolution handed to the quantizer
    WORKING_MAX_EDGE: int = int(os.environ.get("PALETTESYNC_WORKING_MAX_EDGE", "200"))

    # Extraction defaults
    ALPHA_THRESHOLD: int = int(os.environ.get("PALETTESYNC_ALPHA_THRESHOLD", "128"))
    QUANT_STEP: int = int(os.environ.get("PALETTESYNC_QUANT_STEP", "10"))
    TOP_BUCKETS: int = int(os.environ.get("PALETTESYNC_TOP_BUCKETS", "20"))
    DEDUP_THRESHOLD: float = float(os.environ.get("PALETTESYNC_DEDUP_THRESHOLD", "50"))
    MAX_EXTRACTED_COLORS: int = int(os.environ.get("PALETTESYNC_MAX_EXTRACTED_COLORS", "5"))

    # Gradients
    GRADIENT_ANGLES: List[int] = [0, 45, 90, 135, 180]
    SMOOTH_STEPS: int = int(os.environ.get("PALETTESYNC_SMOOTH_STEPS", "5"))

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTESYNC_LOG_LEVEL", "INFO")

    # Feature flags
    METRICS_ENABLED: bool = bool(int(os.environ.get("PALETTESYNC_METRICS_ENABLED", "1")))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "PALETTESYNC_ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:3001"
    )

    # Supported image formats
    SUPPORTED_MIME_TYPES = ["image/jpeg", "image/png", "image/webp"]
    SUPPORTED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}

    @classmethod
    def validate_threshold(cls, threshold: float) -> bool:
        """Validate deduplication distance threshold."""
        return 0 <= threshold <= 442

    @classmethod
    def validate_max_colors(cls, max_colors: int) -> bool:
        """Validate number of extracted colors."""
        return 1 <= max_colors <= cls.TOP_BUCKETS

    @classmethod
    def allowed_origins(cls) -> List[str]:
        return [o.strip() for o in cls.ALLOWED_ORIGINS.split(",") if o.strip()]


# Global config instance
config = Config()
