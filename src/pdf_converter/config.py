"""
Module: pdf_converter.config

Purpose:
    Configuration dataclass for conversion. Immutable configuration
    with validation on construction, so a bad value fails before any
    file is touched.

Key Classes:
    - ConverterConfig: Settings shared by every page of a conversion

Dependencies:
    - dataclasses (std)
    - pdf_converter.layout.page: PageSize presets

Used By:
    - pdf_converter.controller: Conversion entry points
    - pdf_converter.layout.fitter: DPI and margins
    - pdf_converter.cli: Built from command-line flags
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional

from pdf_converter.errors import ConfigurationError
from pdf_converter.layout.page import A4, PageSize, mm_to_pt

DEFAULT_DPI = 150.0
DEFAULT_MARGIN_MM = 10.0


@dataclass(frozen=True)
class ConverterConfig:
    """
    Configuration for image-to-PDF conversion (immutable).

    Attributes:
        dpi: Resolution used to turn pixels into physical size
        margin_mm: Uniform margin on all four sides
        title: PDF Title metadata (None leaves it unset)
        page_size: Page dimensions, A4 unless overridden
        embed_timestamps: Write creation/modification dates and a random
            document ID. Off by default so identical input gives
            identical bytes.

    Example:
        >>> config = ConverterConfig(dpi=300, title="Scans")
        >>> config.margin_pt
        28.346...
    """

    dpi: float = DEFAULT_DPI
    margin_mm: float = DEFAULT_MARGIN_MM
    title: Optional[str] = None
    page_size: PageSize = A4
    embed_timestamps: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.dpi, (int, float)) or isinstance(self.dpi, bool):
            raise ConfigurationError(f"dpi must be a number, got {self.dpi!r}")
        if not math.isfinite(self.dpi) or self.dpi <= 0:
            raise ConfigurationError(f"dpi must be positive: {self.dpi}")
        if not isinstance(self.margin_mm, (int, float)) or isinstance(self.margin_mm, bool):
            raise ConfigurationError(f"margin_mm must be a number, got {self.margin_mm!r}")
        if not math.isfinite(self.margin_mm) or self.margin_mm < 0:
            raise ConfigurationError(f"margin_mm must be non-negative: {self.margin_mm}")
        if self.printable_width_mm <= 0:
            raise ConfigurationError("Margins exceed page width")
        if self.printable_height_mm <= 0:
            raise ConfigurationError("Margins exceed page height")

    @property
    def margin_pt(self) -> float:
        """Margin in points."""
        return mm_to_pt(self.margin_mm)

    @property
    def printable_width_mm(self) -> float:
        """Width available for the image (excluding margins)."""
        return self.page_size.width_mm - 2 * self.margin_mm

    @property
    def printable_height_mm(self) -> float:
        """Height available for the image (excluding margins)."""
        return self.page_size.height_mm - 2 * self.margin_mm

    def with_overrides(self, **changes) -> "ConverterConfig":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)
