"""
Module: pdf_converter.output.document

Purpose:
    In-memory PDF document built with ReportLab. Each added image
    becomes one page of the configured size, in insertion order.
    The document is finalized exactly once into bytes.

Key Classes:
    - PdfDocument: Page accumulator

Dependencies:
    - reportlab: PDF generation
    - pdf_converter.images: DecodedImage
    - pdf_converter.layout: PageSize, PlacedRect

Used By:
    - pdf_converter.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from pdf_converter.errors import DocumentStateError
from pdf_converter.images.decoder import ColorFormat, DecodedImage
from pdf_converter.layout.models import PlacedRect
from pdf_converter.layout.page import PageSize

logger = logging.getLogger(__name__)

PDF_CREATOR = "pdf-converter"


class PdfDocument:
    """
    Ordered collection of single-image pages.

    Pages are never reordered. After finalize() the document is
    closed: adding pages or finalizing again raises DocumentStateError.

    Attributes:
        page_size: Size of every page
        title: Title metadata, if any

    Example:
        >>> doc = PdfDocument(A4, title="Scans")
        >>> doc.add_page(decoded, rect)
        >>> pdf_bytes = doc.finalize()
    """

    def __init__(
        self,
        page_size: PageSize,
        title: Optional[str] = None,
        *,
        embed_timestamps: bool = False,
    ) -> None:
        self.page_size = page_size
        self.title = title
        self._buffer = io.BytesIO()
        # invariant mode pins the creation date and document ID
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=page_size.size_pt,
            invariant=0 if embed_timestamps else 1,
        )
        self._canvas.setCreator(PDF_CREATOR)
        if title:
            self._canvas.setTitle(title)
        self._page_count = 0
        self._finalized = False

    @property
    def page_count(self) -> int:
        """Number of pages added so far."""
        return self._page_count

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def add_page(self, image: DecodedImage, rect: PlacedRect) -> int:
        """
        Append a page showing image at rect.

        Args:
            image: Decoded image to embed at its full pixel resolution
            rect: Placement in points, bottom-left origin

        Returns:
            Zero-based index of the new page

        Raises:
            DocumentStateError: If the document was already finalized
        """
        self._ensure_open()

        # Alpha becomes a soft mask; other formats are drawn opaque
        mask = "auto" if image.color_format is ColorFormat.RGBA else None
        self._canvas.drawImage(
            ImageReader(image.image),
            rect.x,
            rect.y,
            width=rect.width,
            height=rect.height,
            mask=mask,
        )
        self._canvas.showPage()

        index = self._page_count
        self._page_count += 1
        logger.debug(
            f"Page {index + 1}: {image.width}x{image.height} px -> "
            f"{rect.width:.1f}x{rect.height:.1f} pt @ ({rect.x:.1f}, {rect.y:.1f})"
        )
        return index

    def finalize(self) -> bytes:
        """
        Serialize the document.

        Returns:
            Complete PDF file contents

        Raises:
            DocumentStateError: If already finalized or no pages were added
        """
        self._ensure_open()
        if self._page_count == 0:
            raise DocumentStateError("Cannot finalize a document with no pages")

        self._canvas.save()
        self._finalized = True
        data = self._buffer.getvalue()
        self._buffer.close()
        return data

    def _ensure_open(self) -> None:
        if self._finalized:
            raise DocumentStateError("Document has already been finalized")
