"""
Module: pdf_converter.output.writer

Purpose:
    Crash-safe file output. Data goes to a temporary file beside the
    target and is moved into place only once fully written, so the
    target path never holds a partial file.

Key Functions:
    - atomic_write_bytes(): Write bytes atomically
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from pdf_converter.errors import ConversionIOError

logger = logging.getLogger(__name__)


def atomic_write_bytes(data: bytes, path: Path) -> None:
    """
    Write data to path atomically using a temp file.

    Args:
        data: File contents
        path: Destination; parent directories are created

    Raises:
        ConversionIOError: If any step fails (the temp file is removed)
    """
    path = Path(path)
    temp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(data)

        # Use replace() instead of rename() for Windows compatibility
        temp_path.replace(path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise ConversionIOError(f"Cannot write output ({e.strerror or e})", path) from e

    logger.debug(f"Wrote {len(data)} bytes to {path}")
