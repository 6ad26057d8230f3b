"""
Writes exporter output to disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from tokenforge.emit.file_contents import FileContents

from .errors import EmissionError

logger = logging.getLogger(__name__)


def write_files(files: Iterable[FileContents], root: Path) -> list[Path]:
    """Write every FileContents under ``root``.

    Destinations that are already absolute are written as-is. Parent
    folders are created as needed; existing files are overwritten.

    Returns:
        Paths that were written, in order.

    Raises:
        EmissionError: If a folder cannot be created or a file written.
    """
    written: list[Path] = []
    for contents in files:
        target = contents.destination.path
        if not target.is_absolute():
            target = root / target
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(contents.data)
        except OSError as e:
            raise EmissionError(f"Cannot write {target}: {e}") from e
        logger.debug(f"Wrote {target}")
        written.append(target)
    return written
