"""
Module: pdf_converter.layout.models

Purpose:
    Data model for a computed image placement.

Key Classes:
    - PlacedRect: Image rectangle on a page, in points
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlacedRect:
    """
    Position and size of an image on a page (immutable).

    Coordinates are PDF points relative to the bottom-left corner of
    the page, which is what ReportLab's drawImage expects.

    Attributes:
        x: Left edge
        y: Bottom edge
        width: Placed width
        height: Placed height
        scale: Factor applied to the natural size (never above 1.0)

    Example:
        >>> rect = PlacedRect(x=28.3, y=100.0, width=200.0, height=100.0)
        >>> rect.right
        228.3
    """

    x: float
    y: float
    width: float
    height: float
    scale: float = 1.0

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Top edge (y + height)."""
        return self.y + self.height

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height
