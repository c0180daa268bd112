"""Top-level package for the image to PDF converter.

Provides:
- convert_image / convert_images / convert_folder – conversion entry points
- ConverterConfig – immutable conversion settings
- pdf_converter.layout – page placement
- pdf_converter.cli – command-line interface
"""

from .config import ConverterConfig
from .controller import (
    ConversionResult,
    collect_images,
    convert_folder,
    convert_image,
    convert_images,
)
from .errors import (
    ConfigurationError,
    ConversionError,
    ConversionIOError,
    DocumentStateError,
    ImageDecodeError,
    InvalidImageDimensionsError,
    NoValidImagesError,
    UnsupportedFormatError,
)
from .layout import A4, LETTER, PageSize, PlacedRect, fit


def _get_version() -> str:
    """Get version from importlib.metadata (installed) or fall back for source checkouts."""
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("pdf-converter")
    except Exception:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    # Config
    "ConverterConfig",
    "PageSize",
    "A4",
    "LETTER",
    # Conversion
    "convert_image",
    "convert_images",
    "convert_folder",
    "collect_images",
    "ConversionResult",
    # Layout
    "fit",
    "PlacedRect",
    # Errors
    "ConversionError",
    "ConversionIOError",
    "UnsupportedFormatError",
    "ImageDecodeError",
    "InvalidImageDimensionsError",
    "NoValidImagesError",
    "ConfigurationError",
    "DocumentStateError",
]
