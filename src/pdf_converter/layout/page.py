"""
Module: pdf_converter.layout.page

Purpose:
    Physical page sizes and unit conversion between millimetres,
    pixels and PDF points (1/72 inch).

Key Classes:
    - PageSize: Page dimensions in millimetres

Key Functions:
    - mm_to_pt(): Millimetres to points
    - px_to_pt(): Pixels at a DPI to points

Used By:
    - pdf_converter.config: Default page size
    - pdf_converter.layout.fitter: Printable area calculation
    - pdf_converter.output.document: Canvas page size
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

POINTS_PER_INCH = 72.0
MM_PER_INCH = 25.4


def mm_to_pt(mm: float) -> float:
    """Convert millimetres to PDF points."""
    return mm * POINTS_PER_INCH / MM_PER_INCH


def px_to_pt(px: float, dpi: float) -> float:
    """
    Convert pixels to PDF points.

    PDF points are 1/72 inch.

    Args:
        px: Pixel value
        dpi: Dots per inch

    Returns:
        Value in PDF points
    """
    return px / dpi * POINTS_PER_INCH


@dataclass(frozen=True)
class PageSize:
    """
    Page dimensions in millimetres (immutable).

    Attributes:
        width_mm: Page width in millimetres
        height_mm: Page height in millimetres
        name: Optional human-readable name like "A4"

    Example:
        >>> A4.width_pt
        595.275...
    """

    width_mm: float
    height_mm: float
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if not self.width_mm > 0:
            raise ValueError(f"width_mm must be positive: {self.width_mm}")
        if not self.height_mm > 0:
            raise ValueError(f"height_mm must be positive: {self.height_mm}")

    @property
    def width_pt(self) -> float:
        """Page width in points."""
        return mm_to_pt(self.width_mm)

    @property
    def height_pt(self) -> float:
        """Page height in points."""
        return mm_to_pt(self.height_mm)

    @property
    def size_pt(self) -> Tuple[float, float]:
        """(width, height) in points, as ReportLab expects a pagesize."""
        return (self.width_pt, self.height_pt)

    def landscape(self) -> "PageSize":
        """Return the same page rotated so the long edge is horizontal."""
        if self.width_mm >= self.height_mm:
            return self
        name = f"{self.name} landscape" if self.name else None
        return PageSize(self.height_mm, self.width_mm, name)


A4 = PageSize(210.0, 297.0, "A4")
LETTER = PageSize(215.9, 279.4, "Letter")

PAGE_SIZES = {
    "a4": A4,
    "letter": LETTER,
}
