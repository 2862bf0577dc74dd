"""Existence checks for chapter files referenced by a manifest."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import ChapterFileMissing

if TYPE_CHECKING:
    from .manifest.models import Manifest

logger = logging.getLogger(__name__)


def verify_chapter_paths(manifest: "Manifest") -> list[str]:
    """Confirm that every chapter file exists under the manifest root.

    Paths are checked in manifest order and the first missing file raises
    ``ChapterFileMissing``; later paths are left unchecked.
    """
    checked: list[str] = []
    for chapter_path in manifest.chapter_file_paths():
        if "frontmatter" in chapter_path:
            continue
        if not (manifest.root / chapter_path).exists():
            raise ChapterFileMissing(chapter_path)
        checked.append(chapter_path)
    logger.debug("Verified %d chapter file(s) under %s", len(checked), manifest.root)
    return checked
