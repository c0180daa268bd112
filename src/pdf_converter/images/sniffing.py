"""
Module: pdf_converter.images.sniffing

Purpose:
    Identify image formats from their leading bytes. The file name is
    never consulted, so a renamed or mislabelled file is classified by
    what it actually contains.

Key Classes:
    - ImageFormat: Supported formats

Key Functions:
    - sniff_format(): Classify a byte prefix
    - sniff_file(): Classify a file on disk
"""

from __future__ import annotations

import struct
from enum import Enum
from pathlib import Path
from typing import Optional

# Longest prefix any signature check needs (BMP DIB header size at 14..18)
SNIFF_BYTES = 32

# BITMAPCOREHEADER through BITMAPV5HEADER
BMP_DIB_HEADER_SIZES = frozenset({12, 40, 52, 56, 64, 108, 124})


class ImageFormat(str, Enum):
    """Image formats the converter accepts. Values are Pillow format names."""

    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    WEBP = "WEBP"


def sniff_format(header: bytes) -> Optional[ImageFormat]:
    """
    Classify image content by its signature.

    Args:
        header: Leading bytes of the file (SNIFF_BYTES is enough)

    Returns:
        The matching ImageFormat, or None if nothing matches
    """
    if header.startswith(b"\xff\xd8\xff"):
        return ImageFormat.JPEG
    if header.startswith(b"\x89PNG\r\n\x1a\n"):
        return ImageFormat.PNG
    if header[:6] in (b"GIF87a", b"GIF89a"):
        return ImageFormat.GIF
    if header.startswith(b"BM") and _is_bmp_header(header):
        return ImageFormat.BMP
    if header[:4] == b"RIFF" and header[8:12] == b"WEBP":
        return ImageFormat.WEBP
    return None


def sniff_file(path: Path) -> Optional[ImageFormat]:
    """
    Classify a file by reading only its first few bytes.

    Raises:
        OSError: If the file cannot be read
    """
    with open(path, "rb") as f:
        return sniff_format(f.read(SNIFF_BYTES))


def _is_bmp_header(header: bytes) -> bool:
    """Check the DIB header size, since "BM" alone also starts plain text."""
    if len(header) < 18:
        return False
    (dib_size,) = struct.unpack_from("<I", header, 14)
    return dib_size in BMP_DIB_HEADER_SIZES
