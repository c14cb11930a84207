"""Magic-byte format checks and the data URL transport encoding.

Format checks never look at client metadata: the declared MIME type only
selects which signature the payload must carry.
"""

import base64
import binascii
from collections.abc import Callable, Mapping

from core.utils.constants import (
    DATA_URL_BASE64_MARKER,
    DATA_URL_PREFIX,
    MIME_TYPE_GIF,
    MIME_TYPE_JPEG,
    MIME_TYPE_PNG,
    MIME_TYPE_WEBP,
    SUPPORTED_MIME_TYPES,
)
from core.models.asset import MediaType

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SOI = b"\xff\xd8"
JPEG_EOI = b"\xff\xd9"
GIF_PREFIX = b"GIF8"
GIF_VERSIONS = (b"7", b"9")
RIFF_SIGNATURE = b"RIFF"
WEBP_SIGNATURE = b"WEBP"


def is_png(data: bytes) -> bool:
    return len(data) >= 8 and data[:8] == PNG_SIGNATURE


def is_jpeg(data: bytes) -> bool:
    """JPEG must open with SOI and close with EOI."""
    return len(data) >= 4 and data[:2] == JPEG_SOI and data[-2:] == JPEG_EOI


def is_gif(data: bytes) -> bool:
    """Accept GIF87a and GIF89a only."""
    return (
        len(data) >= 6
        and data[:4] == GIF_PREFIX
        and data[4:5] in GIF_VERSIONS
        and data[5:6] == b"a"
    )


def is_webp(data: bytes) -> bool:
    # Bytes 4-7 hold the RIFF chunk size and are not checked
    return len(data) >= 12 and data[:4] == RIFF_SIGNATURE and data[8:12] == WEBP_SIGNATURE


FORMAT_CHECKS: Mapping[str, Callable[[bytes], bool]] = {
    MIME_TYPE_PNG: is_png,
    MIME_TYPE_JPEG: is_jpeg,
    MIME_TYPE_GIF: is_gif,
    MIME_TYPE_WEBP: is_webp,
}


def is_supported_mime_type(value: str | None) -> bool:
    """Return True only for the exact supported MIME strings."""
    return value in SUPPORTED_MIME_TYPES


def matches_declared_type(data: bytes, declared_type: str | None) -> bool:
    """Check that the payload carries the magic bytes of the declared type.

    Unknown declared types and empty or truncated payloads are rejected
    rather than raising.
    """
    check = FORMAT_CHECKS.get(declared_type or "")
    if check is None or not data:
        return False

    return check(data)


def media_type_for(mime_type: str) -> MediaType:
    """Derive the stored media kind from a declared image MIME type."""
    return MediaType.GIF if mime_type == MIME_TYPE_GIF else MediaType.IMAGE


def build_data_url(data: bytes, mime_type: str) -> str:
    """Encode a payload and its MIME type as a single base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"{DATA_URL_PREFIX}{mime_type}{DATA_URL_BASE64_MARKER},{encoded}"


def parse_data_url(url: str) -> tuple[str, bytes]:
    """Split a base64 data URL into (mime_type, payload).

    Raises:
        ValueError: If the value is not a base64 data URL
    """
    if not url.startswith(DATA_URL_PREFIX) or "," not in url:
        raise ValueError("Invalid data URL")

    header, encoded = url[len(DATA_URL_PREFIX) :].split(",", 1)
    if not header.endswith(DATA_URL_BASE64_MARKER):
        raise ValueError("Data URL must be base64 encoded")

    mime_type = header[: -len(DATA_URL_BASE64_MARKER)]
    if not mime_type:
        raise ValueError("Data URL is missing a MIME type")

    try:
        payload = base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise ValueError("Invalid base64 payload in data URL") from exc

    return mime_type, payload
