"""
Module: pdf_converter.images.decoder

Purpose:
    Decode image bytes into a pixel buffer with Pillow, after the
    format has been established by content sniffing. Normalises the
    many Pillow modes down to the three colour formats a PDF image
    page needs.

Key Functions:
    - decode_image(): Decode in-memory bytes
    - load_image(): Read and decode a file

Key Classes:
    - DecodedImage: Decoded pixels plus dimensions and formats
    - ColorFormat: RGB / RGBA / Grayscale

Dependencies:
    - PIL: Image decoding
    - pdf_converter.images.sniffing: Signature detection

Used By:
    - pdf_converter.controller: One decode per page
"""

from __future__ import annotations

import io
import logging
import struct
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from PIL import Image

from pdf_converter.errors import (
    ConversionIOError,
    ImageDecodeError,
    InvalidImageDimensionsError,
    UnsupportedFormatError,
)

from .sniffing import SNIFF_BYTES, ImageFormat, sniff_format

logger = logging.getLogger(__name__)


class ColorFormat(str, Enum):
    """Pixel layouts handed to the PDF writer. Values are Pillow modes."""

    RGB = "RGB"
    RGBA = "RGBA"
    GRAYSCALE = "L"


@dataclass
class DecodedImage:
    """
    Decoded image owned by a single conversion call.

    Close it (or use it as a context manager) once its page has been
    added; the pixel buffer is not needed after that.

    Attributes:
        image: Pillow image in one of the ColorFormat modes
        width: Width in pixels
        height: Height in pixels
        color_format: Pixel layout of image
        source_format: Format the bytes were encoded in
    """

    image: Image.Image
    width: int
    height: int
    color_format: ColorFormat
    source_format: ImageFormat

    @property
    def pixel_data(self) -> bytes:
        """Raw pixel buffer, row-major, in color_format layout."""
        return self.image.tobytes()

    def close(self) -> None:
        """Release the pixel buffer."""
        self.image.close()

    def __enter__(self) -> "DecodedImage":
        """Use as a context manager that closes on exit."""
        return self

    def __exit__(self, *exc_info) -> None:
        """Close the image."""
        self.close()


def decode_image(data: bytes, path: Optional[Path] = None) -> DecodedImage:
    """
    Decode image bytes.

    The format is taken from the byte signature and Pillow is only
    allowed to use that decoder, so mismatched content cannot be
    silently reinterpreted as something else.

    Args:
        data: Encoded image bytes
        path: Source path, used in error messages

    Returns:
        DecodedImage with normalised colour format

    Raises:
        UnsupportedFormatError: If no supported signature matches
        ImageDecodeError: If the decoder rejects the bytes
        InvalidImageDimensionsError: If the image has no pixels
    """
    source_format = sniff_format(data[:SNIFF_BYTES])
    if source_format is None:
        detected = _identify_format(data)
        if detected:
            message = f"Unsupported image format {detected}"
        else:
            message = "Not a JPEG, PNG, GIF, BMP or WebP image"
        raise UnsupportedFormatError(message, path, detected=detected)

    try:
        img = Image.open(io.BytesIO(data), formats=[source_format.value])
        img.load()
    except Image.DecompressionBombError as e:
        raise ImageDecodeError(f"Image too large to decode safely ({e})", path) from e
    except (OSError, SyntaxError, ValueError, EOFError, struct.error) as e:
        raise ImageDecodeError(
            f"Failed to decode {source_format.value} image ({e})", path
        ) from e

    width, height = img.size
    original_mode = img.mode
    if width <= 0 or height <= 0:
        img.close()
        raise InvalidImageDimensionsError(
            f"Decoded image has no pixels ({width}x{height})", path
        )

    normalized = _normalize_mode(img)
    if normalized is not img:
        img.close()

    logger.debug(
        f"Decoded {source_format.value} {width}x{height} "
        f"({original_mode} -> {normalized.mode})"
    )

    return DecodedImage(
        image=normalized,
        width=width,
        height=height,
        color_format=ColorFormat(normalized.mode),
        source_format=source_format,
    )


def load_image(path: Path) -> DecodedImage:
    """
    Read a file and decode it.

    Raises:
        ConversionIOError: If the file cannot be read
        UnsupportedFormatError, ImageDecodeError, InvalidImageDimensionsError:
            As for decode_image()
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ConversionIOError(f"Cannot read image ({e.strerror or e})", path) from e
    return decode_image(data, Path(path))


def _identify_format(data: bytes) -> Optional[str]:
    """Name the format of unsupported content for error messages, if Pillow knows it."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.format
    except (OSError, SyntaxError, ValueError, EOFError, struct.error):
        return None


def _normalize_mode(img: Image.Image) -> Image.Image:
    """
    Convert any Pillow mode to RGB, RGBA or L.

    Palette images keep their transparency as an alpha channel.
    """
    mode = img.mode
    if mode in ("RGB", "RGBA", "L"):
        return img
    if mode == "1":
        return img.convert("L")
    if mode in ("LA", "La", "PA", "RGBa"):
        return img.convert("RGBA")
    if mode == "P":
        return img.convert("RGBA" if "transparency" in img.info else "RGB")
    return img.convert("RGB")
