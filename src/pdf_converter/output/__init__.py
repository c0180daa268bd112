"""
Module: pdf_converter.output

Purpose:
    PDF assembly and file output.
    Builds documents with ReportLab and writes them atomically.

Key Functions:
    - atomic_write_bytes(): Crash-safe write

Key Classes:
    - PdfDocument: Page accumulator

Dependencies:
    - reportlab: PDF generation
"""

from .document import PdfDocument
from .writer import atomic_write_bytes

__all__ = [
    "PdfDocument",
    "atomic_write_bytes",
]
