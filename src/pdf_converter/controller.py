"""
Module: pdf_converter.controller

Purpose:
    Orchestrate image-to-PDF conversion.
    Collect → Decode → Fit → Add page → Finalize → Write

Key Functions:
    - convert_image(): One image to a one-page PDF
    - convert_images(): A list of images, in the given order
    - convert_folder(): Every image in a directory, by file name
    - collect_images(): Find and order the images in a directory

Key Classes:
    - ConversionResult: Outcome of a successful conversion

Dependencies:
    - pdf_converter.images: Sniffing and decoding
    - pdf_converter.layout: Page placement
    - pdf_converter.output: PDF assembly and atomic write

Used By:
    - pdf_converter.cli: Command-line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .config import ConverterConfig
from .errors import ConversionIOError, NoValidImagesError
from .images import load_image, sniff_file
from .layout import fit
from .output import PdfDocument, atomic_write_bytes

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ConversionResult:
    """
    Result of a successful conversion (immutable).

    Attributes:
        output_path: Path of the written PDF
        page_count: Number of pages written
        sources: Input images in page order

    Example:
        >>> result = convert_folder(Path("scans"), Path("scans.pdf"))
        >>> print(f"Wrote {result.page_count} pages to {result.output_path}")
    """
    output_path: Path
    page_count: int
    sources: Tuple[Path, ...]


def convert_image(
    input_path: PathLike,
    output_path: PathLike,
    config: Optional[ConverterConfig] = None,
) -> ConversionResult:
    """
    Convert a single image to a one-page PDF.

    Args:
        input_path: Image file (format detected from content)
        output_path: Where to write the PDF
        config: Conversion settings (defaults to ConverterConfig())

    Returns:
        ConversionResult with page_count == 1

    Raises:
        ConversionIOError: If the image cannot be read or the PDF written
        UnsupportedFormatError: If the file is not a supported image
        ImageDecodeError: If the image is corrupt or truncated
        InvalidImageDimensionsError: If the image has no pixels
    """
    input_path = Path(input_path)
    logger.info(f"Converting image {input_path} -> {output_path}")
    return _convert([input_path], Path(output_path), config or ConverterConfig())


def convert_images(
    input_paths: Iterable[PathLike],
    output_path: PathLike,
    config: Optional[ConverterConfig] = None,
) -> ConversionResult:
    """
    Convert several images into one PDF, one page each.

    Pages follow the order of input_paths exactly; nothing is sorted.
    The first bad file aborts the whole call and no PDF is written.

    Args:
        input_paths: Image files in page order
        output_path: Where to write the PDF
        config: Conversion settings (defaults to ConverterConfig())

    Returns:
        ConversionResult

    Raises:
        NoValidImagesError: If input_paths is empty
        ConversionError: Any error convert_image() can raise, for the
            first file that fails
    """
    paths = [Path(p) for p in input_paths]
    if not paths:
        raise NoValidImagesError("No images provided")

    logger.info(f"Converting {len(paths)} images -> {output_path}")
    return _convert(paths, Path(output_path), config or ConverterConfig())


def convert_folder(
    input_dir: PathLike,
    output_path: PathLike,
    config: Optional[ConverterConfig] = None,
) -> ConversionResult:
    """
    Convert every image in a directory into one PDF.

    Images are found by content, not extension, and ordered by file
    name (see collect_images()). Batch policy is fail-fast: a
    recognised image that cannot be read or decoded aborts the call,
    naming the file, and no PDF is written.

    Args:
        input_dir: Directory to scan (not recursive)
        output_path: Where to write the PDF
        config: Conversion settings (defaults to ConverterConfig())

    Returns:
        ConversionResult; page_count is the number of pages written

    Raises:
        ConversionIOError: If input_dir is missing or not a directory
        NoValidImagesError: If the directory holds no recognised images
        ConversionError: For the first image that fails to convert

    Example:
        >>> convert_folder("scans", "scans.pdf", ConverterConfig(title="Scans"))
    """
    input_dir = Path(input_dir)
    output_path = Path(output_path)
    logger.info(f"Converting folder {input_dir} -> {output_path}")

    images = collect_images(input_dir)
    if not images:
        raise NoValidImagesError("No supported images found in folder", input_dir)

    logger.info(f"Found {len(images)} images")
    return _convert(images, output_path, config or ConverterConfig())


def collect_images(input_dir: PathLike) -> List[Path]:
    """
    List the supported images in a directory, sorted by file name.

    Only regular files directly inside input_dir are considered. Each
    is classified by its leading bytes; files that match no supported
    signature are skipped. Ordering is plain string comparison of the
    file name, which is case-sensitive and platform independent.

    Args:
        input_dir: Directory to scan

    Returns:
        Image paths in page order

    Raises:
        ConversionIOError: If the directory or a file in it cannot be read
    """
    input_dir = Path(input_dir)
    if not input_dir.exists():
        raise ConversionIOError("Input folder does not exist", input_dir)
    if not input_dir.is_dir():
        raise ConversionIOError("Input path is not a folder", input_dir)

    try:
        entries = sorted(
            (entry for entry in input_dir.iterdir() if entry.is_file()),
            key=lambda entry: entry.name,
        )
    except OSError as e:
        raise ConversionIOError(f"Cannot list folder ({e.strerror or e})", input_dir) from e

    images: List[Path] = []
    for entry in entries:
        try:
            image_format = sniff_file(entry)
        except OSError as e:
            raise ConversionIOError(f"Cannot read file ({e.strerror or e})", entry) from e

        if image_format is None:
            logger.debug(f"Skipping {entry.name}: not a supported image")
            continue
        images.append(entry)

    return images


def _convert(
    paths: Sequence[Path],
    output_path: Path,
    config: ConverterConfig,
) -> ConversionResult:
    """
    Assemble pages for paths in order and write the PDF.

    Only one decoded image is held at a time. Nothing touches
    output_path until the whole document has been serialized.
    """
    start_time = time.perf_counter()

    document = PdfDocument(
        config.page_size,
        title=config.title,
        embed_timestamps=config.embed_timestamps,
    )

    for index, path in enumerate(paths, start=1):
        logger.debug(f"Processing {index}/{len(paths)}: {path.name}")
        with load_image(path) as image:
            rect = fit(image.width, image.height, config)
            document.add_page(image, rect)

    pdf_bytes = document.finalize()
    atomic_write_bytes(pdf_bytes, output_path)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Wrote {document.page_count} pages to {output_path} in {elapsed:.2f}s")

    return ConversionResult(
        output_path=output_path,
        page_count=document.page_count,
        sources=tuple(paths),
    )
