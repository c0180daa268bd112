"""
Module: pdf_converter.errors

Purpose:
    Exception hierarchy for image-to-PDF conversion. Every failure a
    conversion call can report is a subclass of ConversionError and
    carries the offending path where one exists.

Key Classes:
    - ConversionError: Base class for all conversion failures
    - ConversionIOError: File not found, permission denied, write failure
    - UnsupportedFormatError: Content matched no supported signature
    - ImageDecodeError: Signature matched but decoding failed
    - InvalidImageDimensionsError: Zero-sized image
    - NoValidImagesError: Batch found nothing to convert
    - ConfigurationError: Invalid ConverterConfig
    - DocumentStateError: PdfDocument used after finalize

Used By:
    - pdf_converter.controller: Raises and chains these
    - pdf_converter.cli: Maps them to exit status
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ConversionError(Exception):
    """
    Base class for conversion failures.

    Attributes:
        path: File or directory the failure relates to (None if not path-specific)
    """

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{message}: {self.path}"
        return message


class ConversionIOError(ConversionError):
    """Reading an input or writing the output failed."""
    pass


class UnsupportedFormatError(ConversionError):
    """
    File content does not match any supported image signature.

    Attributes:
        detected: Name of the format that was detected, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        detected: Optional[str] = None,
    ) -> None:
        self.detected = detected
        super().__init__(message, path)


class ImageDecodeError(ConversionError):
    """Bytes matched a format signature but could not be decoded."""
    pass


class InvalidImageDimensionsError(ConversionError):
    """Decoded image has a zero width or height."""
    pass


class NoValidImagesError(ConversionError):
    """Batch conversion found no convertible images."""
    pass


class ConfigurationError(ConversionError, ValueError):
    """Converter configuration is invalid."""
    pass


class DocumentStateError(RuntimeError):
    """PdfDocument was mutated or finalized in an invalid state."""
    pass
