"""Select the manifest source and assemble a ``Manifest``."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import MD_PATH, load_book_config
from ..errors import ManifestConfigError, ManifestNotFound
from ..locator import find_book_root
from ..verify import verify_chapter_paths
from .latex import parse_latex_book
from .listing import read_listing
from .models import Manifest, SourceFormat

logger = logging.getLogger(__name__)


def load_manifest(
    start: str | Path | None = None,
    *,
    source: SourceFormat | str = SourceFormat.POLYTEX,
    verify_paths: bool = False,
    root: str | Path | None = None,
) -> Manifest:
    """Resolve the book root and build its manifest.

    ``root`` skips discovery when the caller already resolved it; otherwise the
    search starts at ``start`` (default: the current directory).
    """
    try:
        fmt = SourceFormat.coerce(source)
    except ValueError as exc:
        raise ManifestNotFound() from exc

    book_root = Path(root).resolve() if root is not None else find_book_root(start)
    logger.debug("Loading %s manifest from %s", fmt.value, book_root)

    if fmt is SourceFormat.MARKDOWN:
        manifest = _load_markdown(book_root)
    else:
        manifest = _load_polytex(book_root)

    if verify_paths:
        verify_chapter_paths(manifest)
    return manifest


def _load_markdown(root: Path) -> Manifest:
    if not (root / MD_PATH).exists():
        raise ManifestNotFound()
    return Manifest(
        source=SourceFormat.MARKDOWN,
        filename=MD_PATH.as_posix(),
        root=root,
        chapters=read_listing(root),
    )


def _load_polytex(root: Path) -> Manifest:
    config = load_book_config(root)
    master_path = root / config.master_path
    try:
        text = master_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestConfigError(f"Master file not found: {master_path}", path=str(master_path)) from exc
    except UnicodeDecodeError as exc:
        raise ManifestConfigError(f"Master file is not valid UTF-8: {master_path}", path=str(master_path)) from exc

    book = parse_latex_book(root, text)
    return Manifest(
        source=SourceFormat.POLYTEX,
        filename=config.filename,
        root=root,
        title=config.title,
        subtitle=config.subtitle,
        author=book.author,
        chapters=book.chapters,
        frontmatter=book.frontmatter,
        attributes=config.extras,
    )
