"""
File Service

Validation and inline encoding of uploaded files.

Files are stored in the database as ``data:<mime>;base64,<payload>``
strings, so size limits are kept under the row size the portal tolerates.
"""

import base64
import binascii
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import quote

from fastapi import HTTPException, Response, UploadFile, status

from app.core.config import settings


class FileValidationError(ValueError):
    """Base error for rejected files."""


class UnsupportedFileType(FileValidationError):
    pass


class FileTooLarge(FileValidationError):
    pass


@dataclass
class FilePayload:
    """A validated file ready to persist."""
    file_name: str
    content_type: str
    size: int
    data: str


# ============== Pure Helpers ==============

def validate_file(
    content_type: str,
    size: int,
    max_bytes: int,
    allowed_types: Optional[Iterable[str]] = None,
) -> None:
    """
    Check a file against the type allow-list and the size ceiling.

    Raises:
        UnsupportedFileType: If the content type is not allowed.
        FileTooLarge: If the file exceeds ``max_bytes``.
    """
    if allowed_types is None:
        allowed_types = settings.allowed_content_types_list
    if content_type not in set(allowed_types):
        raise UnsupportedFileType(f"Tipo de archivo no permitido: {content_type}")
    if size > max_bytes:
        raise FileTooLarge(
            f"El archivo pesa {format_bytes(size)}; el máximo es {format_bytes(max_bytes)}"
        )


def to_data_url(content: bytes, content_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


def parse_data_url(data_url: str) -> tuple[str, bytes]:
    """
    Split a base64 data URL into its content type and decoded bytes.

    Raises:
        ValueError: If the string is not a base64 data URL.
    """
    if not data_url.startswith("data:") or "," not in data_url:
        raise ValueError("Not a data URL")
    header, payload = data_url[5:].split(",", 1)
    if not header.endswith(";base64"):
        raise ValueError("Only base64 data URLs are supported")
    content_type = header[: -len(";base64")] or "application/octet-stream"
    try:
        return content_type, base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError("Invalid base64 payload") from e


def format_bytes(n: int) -> str:
    """Human-readable size: ``512 B``, ``1.5 KB``, ``2.25 MB``."""
    if n < 1024:
        return f"{n} B"
    kb = n / 1024
    if kb < 1024:
        return f"{kb:.1f} KB"
    return f"{kb / 1024:.2f} MB"


# ============== Request Helpers ==============

def raise_for_file_error(error: FileValidationError) -> None:
    """Translate a validation failure into the matching HTTP error."""
    if isinstance(error, FileTooLarge):
        code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    else:
        code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    raise HTTPException(status_code=code, detail=str(error)) from error


async def read_limited(upload: UploadFile, max_bytes: int) -> bytes:
    """Read at most ``max_bytes + 1`` bytes, enough to tell an oversize file apart."""
    return await upload.read(max_bytes + 1)


async def read_upload(
    upload: UploadFile,
    max_bytes: int,
    allowed_types: Optional[Iterable[str]] = None,
) -> FilePayload:
    """
    Read and validate a multipart upload.

    Args:
        upload: The incoming file.
        max_bytes: Size ceiling for this kind of file.
        allowed_types: Content type allow-list; defaults to the configured one.

    Returns:
        FilePayload: Name, type, size and data URL.

    Raises:
        HTTPException: 415 for a disallowed type, 413 when too large.
    """
    content_type = upload.content_type or "application/octet-stream"
    content = await read_limited(upload, max_bytes)
    # Starlette records the full size once the body is spooled
    size = max(len(content), upload.size or 0)
    try:
        validate_file(content_type, size, max_bytes, allowed_types)
    except FileValidationError as e:
        raise_for_file_error(e)

    return FilePayload(
        file_name=upload.filename or "archivo",
        content_type=content_type,
        size=len(content),
        data=to_data_url(content, content_type),
    )


def file_response(file_name: str, data_url: str) -> Response:
    """Decode a stored data URL into a download."""
    content_type, content = parse_data_url(data_url)
    return Response(
        content=content,
        media_type=content_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(file_name)}"},
    )
