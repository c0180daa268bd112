"""
Command-line interface: convert an image or a folder of images to PDF.

    pdf-converter scans/ -o scans.pdf --dpi 300 --title "Scans"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import DEFAULT_DPI, DEFAULT_MARGIN_MM, ConverterConfig
from .controller import convert_folder, convert_image
from .errors import ConversionError
from .layout import PAGE_SIZES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-converter",
        description="Convert JPEG, PNG, GIF, BMP or WebP images to PDF.",
    )
    parser.add_argument(
        "input", type=Path,
        help="Image file, or folder whose images become pages in file-name order",
    )
    parser.add_argument("--output", "-o", type=Path, required=True, help="PDF file to write")
    parser.add_argument("--dpi", type=float, default=DEFAULT_DPI,
                        help=f"Image resolution used for sizing (default {DEFAULT_DPI:g})")
    parser.add_argument("--margin-mm", type=float, default=DEFAULT_MARGIN_MM,
                        help=f"Margin on every side in mm (default {DEFAULT_MARGIN_MM:g})")
    parser.add_argument("--title", help="PDF Title metadata")
    parser.add_argument("--page-size", choices=sorted(PAGE_SIZES), default="a4",
                        help="Page size (default a4)")
    parser.add_argument("--landscape", action="store_true", help="Rotate the page to landscape")
    parser.add_argument("--timestamps", action="store_true",
                        help="Embed creation dates (output is no longer byte-reproducible)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each page")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    page_size = PAGE_SIZES[args.page_size]
    if args.landscape:
        page_size = page_size.landscape()

    try:
        config = ConverterConfig(
            dpi=args.dpi,
            margin_mm=args.margin_mm,
            title=args.title,
            page_size=page_size,
            embed_timestamps=args.timestamps,
        )
        if args.input.is_dir():
            result = convert_folder(args.input, args.output, config)
        else:
            result = convert_image(args.input, args.output, config)
    except ConversionError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print(f"[OK] Wrote {result.page_count} page(s) to {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
