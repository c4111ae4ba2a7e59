"""
Avatar Service

Turns an uploaded picture into a small square JPEG data URL.
"""

import io
import logging

from fastapi import HTTPException, status
from PIL import Image, ImageOps, UnidentifiedImageError

from app.core.config import settings
from app.services.file_service import to_data_url


logger = logging.getLogger(__name__)


def _encode_jpeg(image: Image.Image, quality: int) -> str:
    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=quality)
    return to_data_url(buffer.getvalue(), "image/jpeg")


def resize_avatar(
    content: bytes,
    size: int | None = None,
    quality: int | None = None,
) -> str:
    """
    Center-crop and scale an image to a ``size`` x ``size`` JPEG.

    If the resulting data URL is still larger than the avatar ceiling it is
    encoded once more at the fallback quality.

    Args:
        content: Raw image bytes.
        size: Edge length in pixels.
        quality: Initial JPEG quality.

    Returns:
        str: ``data:image/jpeg;base64,...``

    Raises:
        ValueError: If the bytes are not a readable image.
    """
    size = size or settings.AVATAR_SIZE
    quality = quality or settings.AVATAR_QUALITY

    try:
        with Image.open(io.BytesIO(content)) as source:
            image = ImageOps.exif_transpose(source).convert("RGB")
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError("Imagen no válida") from e

    image = ImageOps.fit(image, (size, size), method=Image.Resampling.LANCZOS)

    data_url = _encode_jpeg(image, quality)
    if len(data_url) * 3 // 4 > settings.AVATAR_MAX_BYTES:
        logger.info("Avatar above %d bytes, re-encoding", settings.AVATAR_MAX_BYTES)
        data_url = _encode_jpeg(image, settings.AVATAR_FALLBACK_QUALITY)
    return data_url


def build_avatar(content: bytes, content_type: str) -> str:
    """
    Validate an avatar upload and return the resized data URL.

    Raises:
        HTTPException: 415 for a non-image type, 413 when the raw file is
            too large, 400 when the image cannot be decoded.
    """
    if content_type not in settings.avatar_content_types_list:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="La foto debe ser JPG, PNG o WebP",
        )
    if len(content) > settings.AVATAR_MAX_RAW_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="La imagen es demasiado grande",
        )
    try:
        return resize_avatar(content)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
