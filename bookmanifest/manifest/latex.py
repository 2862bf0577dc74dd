"""Pattern scanning of PolyTeX master and chapter files.

The scanners work line by line on plain text; they do not understand nested
braces or commands split across lines. For example, in

    \\frontmatter
    \\maketitle
    \\include{chapters/preface}
    \\mainmatter
    \\include{chapters/a_chapter}

only ``a_chapter`` becomes a numbered chapter: the preface lives inside the
frontmatter span, which is removed before includes are collected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from ..errors import ChapterFileMissing, ManifestConfigError
from .models import FRONTMATTER_SLUG, Chapter, Section

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r"\\frontmatter\b")
FRONTMATTER_SPAN_PATTERN = re.compile(r"\\frontmatter.*\\mainmatter", re.DOTALL)
AUTHOR_PATTERN = re.compile(r"^\s*\\author\{(.*?)\}", re.MULTILINE)
INCLUDE_PATTERN = re.compile(r"^\s*\\include\{chapters/(.*?)\}", re.MULTILINE)
CHAPTER_PATTERN = re.compile(r"^\s*\\chapter\{(.*)\}", re.MULTILINE)
SECTION_PATTERN = re.compile(r"^\s*\\section\{(.*)\}", re.MULTILINE)


@dataclass(slots=True)
class LatexBook:
    """Structure scanned out of a master file and its chapters."""

    frontmatter: bool = False
    author: str | None = None
    chapters: list[Chapter] = field(default_factory=list)


def has_frontmatter(text: str) -> bool:
    return FRONTMATTER_PATTERN.search(text) is not None


def strip_frontmatter(text: str) -> str:
    """Remove everything from ``\\frontmatter`` through ``\\mainmatter``."""
    return FRONTMATTER_SPAN_PATTERN.sub("", text)


def extract_author(text: str) -> str | None:
    match = AUTHOR_PATTERN.search(text)
    return match.group(1) if match else None


def extract_chapter_includes(text: str) -> list[str]:
    """Return chapter include targets in textual order."""
    return INCLUDE_PATTERN.findall(text)


def extract_title(text: str) -> str | None:
    match = CHAPTER_PATTERN.search(text)
    return match.group(1) if match else None


def extract_sections(text: str) -> list[Section]:
    return [
        Section(name=name, section_number=number)
        for number, name in enumerate(SECTION_PATTERN.findall(text), start=1)
    ]


def slug_from_include(name: str) -> str:
    """Derive a slug from an include target such as ``part/intro.tex``."""
    return PurePosixPath(name.strip()).stem


def frontmatter_chapter() -> Chapter:
    return Chapter(slug=FRONTMATTER_SLUG, title="Frontmatter", chapter_number=0, sections=[])


def read_chapter(root: Path, slug: str, chapter_number: int) -> Chapter:
    relative = f"chapters/{slug}.tex"
    chapter_file = root / relative
    try:
        content = chapter_file.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ChapterFileMissing(relative) from exc
    except UnicodeDecodeError as exc:
        raise ManifestConfigError(f"Chapter file is not valid UTF-8: {relative}", path=relative) from exc

    title = extract_title(content)
    if title is None:
        logger.debug("No \\chapter title found in %s", relative)
    return Chapter(
        slug=slug,
        title=title,
        chapter_number=chapter_number,
        sections=extract_sections(content),
    )


def parse_latex_book(root: Path, text: str) -> LatexBook:
    """Scan the master file text and read every included chapter under ``root``.

    A missing chapter file aborts the whole scan with ``ChapterFileMissing``.
    """
    book = LatexBook()
    if has_frontmatter(text):
        book.frontmatter = True
        book.chapters.append(frontmatter_chapter())

    body = strip_frontmatter(text)
    book.author = extract_author(body)

    slugs: list[str] = []
    for name in extract_chapter_includes(body):
        slug = slug_from_include(name)
        if not slug:
            logger.warning("Ignoring chapter include with an empty name: %r", name)
            continue
        slugs.append(slug)

    for index, slug in enumerate(slugs):
        book.chapters.append(read_chapter(root, slug, index + 1))

    logger.debug(
        "Scanned %d chapter(s) from master file (frontmatter=%s)",
        len(book.chapters),
        book.frontmatter,
    )
    return book
