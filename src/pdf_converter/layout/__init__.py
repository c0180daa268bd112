"""
Module: pdf_converter.layout

Purpose:
    Page layout for image conversion.
    Turns image pixel dimensions into a positioned rectangle on a page.

Key Functions:
    - fit(): Main entry point for layout

Key Classes:
    - PageSize: Page dimensions
    - PlacedRect: Positioned image rectangle

Used By:
    - pdf_converter.controller: Per-page placement
"""

from .page import A4, LETTER, PAGE_SIZES, PageSize, mm_to_pt, px_to_pt
from .models import PlacedRect
from .fitter import fit

__all__ = [
    # Page
    "A4",
    "LETTER",
    "PAGE_SIZES",
    "PageSize",
    "mm_to_pt",
    "px_to_pt",
    # Models
    "PlacedRect",
    # Functions
    "fit",
]
