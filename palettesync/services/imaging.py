"""
PaletteSync Imaging Utilities
Handles upload validation, decoding to RGBA and reduction to the working
resolution consumed by the quantizer.
"""
import io
from typing import Tuple

import cv2
import numpy as np
from fastapi import HTTPException, UploadFile
from PIL import Image, UnidentifiedImageError

from palettesync.config import config


class ImageDecodeError(ValueError):
    """Uploaded bytes could not be decoded as an image."""


def validate_file_upload(file: UploadFile) -> None:
    """
    Validate uploaded file for size and format compliance.

    Args:
        file: FastAPI UploadFile object

    Raises:
        HTTPException: 413 for oversized files, 415 for unsupported formats
    """
    # file.size might be None for some clients
    if file.size and file.size > config.MAX_FILE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {config.MAX_FILE_MB}MB"
        )

    if file.content_type not in config.SUPPORTED_MIME_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported media type. Supported: {', '.join(config.SUPPORTED_MIME_TYPES)}"
        )

    if file.filename and '.' in file.filename:
        ext = "." + file.filename.lower().rsplit('.', 1)[-1]
        if ext not in config.SUPPORTED_EXTENSIONS:
            raise HTTPException(
                status_code=415,
                detail=f"Unsupported file extension. Supported: {', '.join(sorted(config.SUPPORTED_EXTENSIONS))}"
            )


def validate_magic_bytes(file_bytes: bytes) -> str:
    """
    Validate file magic bytes to ensure it's actually an image.

    Returns:
        Detected MIME type

    Raises:
        ImageDecodeError: For truncated or unrecognized files
    """
    if len(file_bytes) < 12:
        raise ImageDecodeError("File too small or corrupt")

    if file_bytes.startswith(b'\xff\xd8\xff'):
        return "image/jpeg"
    if file_bytes.startswith(b'\x89PNG\r\n\x1a\n'):
        return "image/png"
    if file_bytes[:4] == b'RIFF' and file_bytes[8:12] == b'WEBP':
        return "image/webp"
    raise ImageDecodeError("Invalid image file. Magic bytes don't match supported formats.")


def decode_rgba(file_bytes: bytes) -> np.ndarray:
    """
    Decode image bytes into an RGBA uint8 array of shape (height, width, 4).

    Raises:
        ImageDecodeError: If Pillow cannot decode the data or the image declares more
            than ``MAX_IMAGE_PIXELS`` pixels
    """
    validate_magic_bytes(file_bytes)
    try:
        with Image.open(io.BytesIO(file_bytes)) as pil_image:
            width, height = pil_image.size
            if width * height > config.MAX_IMAGE_PIXELS:
                raise ImageDecodeError(
                    f"Image too large: {width}x{height} exceeds {config.MAX_IMAGE_PIXELS} pixels"
                )
            rgba = pil_image.convert("RGBA")
    except Image.DecompressionBombError as e:
        raise ImageDecodeError(f"Image too large: {e}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Failed to decode image: {e}") from e
    return np.array(rgba, dtype=np.uint8)


def working_size(width: int, height: int, max_edge: int = None) -> Tuple[int, int]:
    """
    Size that fits a ``max_edge`` square with aspect ratio preserved.

    Small images are scaled up to the box as well; each side is truncated
    to whole pixels and kept at least 1.
    """
    if max_edge is None:
        max_edge = config.WORKING_MAX_EDGE
    if width <= 0 or height <= 0:
        raise ImageDecodeError(f"Invalid image dimensions: {width}x{height}")

    scale = min(max_edge / width, max_edge / height)
    return max(1, int(width * scale)), max(1, int(height * scale))


def resize_to_working(rgba: np.ndarray, max_edge: int = None) -> np.ndarray:
    """Resize an RGBA array to the quantizer working resolution."""
    height, width = rgba.shape[:2]
    new_width, new_height = working_size(width, height, max_edge)
    if (new_width, new_height) == (width, height):
        return rgba

    # INTER_AREA for downscaling, INTER_LINEAR when enlarging
    interpolation = cv2.INTER_AREA if new_width < width else cv2.INTER_LINEAR
    return cv2.resize(rgba, (new_width, new_height), interpolation=interpolation)


def load_working_image(file_bytes: bytes, max_edge: int = None) -> np.ndarray:
    """Decode and reduce image bytes to a working-resolution RGBA array."""
    return resize_to_working(decode_rgba(file_bytes), max_edge)


async def read_upload(file: UploadFile) -> bytes:
    """
    Read an upload after validating its declared size and type.

    Raises:
        HTTPException: 400 if the body cannot be read, 413 if it is too large
    """
    validate_file_upload(file)
    try:
        file_bytes = await file.read()
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Failed to read file: {str(e)}")

    if len(file_bytes) > config.MAX_FILE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {config.MAX_FILE_MB}MB"
        )
    return file_bytes
