"""
Module: pdf_converter.layout.fitter

Purpose:
    Fit an image onto a page. Converts pixel dimensions to a natural
    physical size at the configured DPI, shrinks it to the printable
    area if needed and centres it between the margins.

Key Functions:
    - fit(): Compute the PlacedRect for one image

Dependencies:
    - pdf_converter.layout.page: Unit conversion
    - pdf_converter.layout.models: PlacedRect

Used By:
    - pdf_converter.controller: One call per page
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pdf_converter.errors import ConfigurationError, InvalidImageDimensionsError

from .models import PlacedRect
from .page import PageSize, mm_to_pt, px_to_pt

if TYPE_CHECKING:
    from pdf_converter.config import ConverterConfig


def fit(
    pixel_width: int,
    pixel_height: int,
    config: "ConverterConfig",
    page: Optional[PageSize] = None,
) -> PlacedRect:
    """
    Place an image within the printable area of a page.

    The image keeps its aspect ratio and is never enlarged beyond its
    natural size at config.dpi; it is only shrunk when it would not fit.

    Args:
        pixel_width: Image width in pixels
        pixel_height: Image height in pixels
        config: Converter configuration (dpi, margin)
        page: Page size (defaults to config.page_size)

    Returns:
        PlacedRect centred in the printable area

    Raises:
        InvalidImageDimensionsError: If either dimension is not positive
        ConfigurationError: If the margins leave no printable area on page

    Example:
        >>> rect = fit(1500, 1500, ConverterConfig(dpi=150))
        >>> round(rect.width, 1)  # 10 inches at 150 DPI, shrunk to fit A4
        538.6
    """
    if pixel_width <= 0 or pixel_height <= 0:
        raise InvalidImageDimensionsError(
            f"Image dimensions must be positive, got {pixel_width}x{pixel_height}"
        )

    page = page or config.page_size
    margin_pt = mm_to_pt(config.margin_mm)
    printable_width = mm_to_pt(page.width_mm - 2 * config.margin_mm)
    printable_height = mm_to_pt(page.height_mm - 2 * config.margin_mm)
    if printable_width <= 0:
        raise ConfigurationError("Margins exceed page width")
    if printable_height <= 0:
        raise ConfigurationError("Margins exceed page height")

    natural_width = px_to_pt(float(pixel_width), config.dpi)
    natural_height = px_to_pt(float(pixel_height), config.dpi)

    scale = min(printable_width / natural_width, printable_height / natural_height)
    if scale >= 1.0:
        scale = 1.0

    placed_width = natural_width * scale
    placed_height = natural_height * scale

    # Rounding in the division above can overshoot the box by an ulp
    placed_width = min(placed_width, printable_width)
    placed_height = min(placed_height, printable_height)

    x = margin_pt + (printable_width - placed_width) / 2
    y = margin_pt + (printable_height - placed_height) / 2

    return PlacedRect(x=x, y=y, width=placed_width, height=placed_height, scale=scale)
