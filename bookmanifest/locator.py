"""Discovery of the book root directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ROOT_MARKERS
from .errors import ManifestNotFound

logger = logging.getLogger(__name__)


def is_book_root(directory: Path) -> bool:
    """Return True when ``directory`` holds book.yml or markdown/Book.txt."""
    return any((directory / marker).exists() for marker in ROOT_MARKERS)


def find_book_root(start: str | Path | None = None) -> Path:
    """Walk upward from ``start`` until a directory with a root marker is found.

    The process working directory is only read (as the default start), never
    changed; callers thread the returned path through later steps.
    """
    current = Path(start) if start is not None else Path.cwd()
    current = current.resolve()

    while True:
        logger.debug("Looking for book markers in %s", current)
        if is_book_root(current):
            return current
        parent = current.parent
        if parent == current:
            raise ManifestNotFound()
        current = parent
