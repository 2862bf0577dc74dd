"""Chapter lists read from a Markdown listing file (markdown/Book.txt)."""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath

from ..config import MD_PATH
from .models import Chapter

logger = logging.getLogger(__name__)

MARKDOWN_ENTRY_PATTERN = re.compile(r"(.*)\.md")


def slug_from_entry(entry: str) -> str:
    name = PurePosixPath(entry.strip()).name
    if name.endswith(".md"):
        name = name[: -len(".md")]
    return name


def parse_listing(text: str) -> list[Chapter]:
    """Build untitled, unnumbered chapters from listing lines naming ``.md`` files."""
    chapters: list[Chapter] = []
    for line in text.splitlines():
        if not MARKDOWN_ENTRY_PATTERN.search(line):
            continue
        slug = slug_from_entry(line)
        if not slug:
            logger.warning("Skipping listing entry without a file name: %r", line)
            continue
        chapters.append(Chapter(slug=slug))
    return chapters


def read_listing(root: Path) -> list[Chapter]:
    listing_path = root / MD_PATH
    chapters = parse_listing(listing_path.read_text(encoding="utf-8"))
    logger.debug("Read %d chapter(s) from %s", len(chapters), listing_path)
    return chapters
