from pathlib import Path

import pytest

from bookmanifest.errors import ChapterFileMissing, ManifestConfigError, ManifestNotFound
from bookmanifest.manifest import SourceFormat, load_manifest


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _polytex_book(root: Path, *, config: str = "filename: book\n") -> Path:
    _write(root / "book.yml", config)
    _write(
        root / "book.tex",
        "\\author{Ada Lovelace}\n"
        "\\frontmatter\n"
        "\\include{chapters/preface}\n"
        "\\mainmatter\n"
        "\\include{chapters/intro}\n"
        "\\include{chapters/setup}\n",
    )
    _write(root / "chapters" / "intro.tex", "\\chapter{Introduction}\n\\section{Why}\n")
    _write(root / "chapters" / "setup.tex", "\\chapter{Setup}\n")
    return root


def test_load_polytex_manifest_from_nested_directory(tmp_path: Path) -> None:
    root = _polytex_book(
        tmp_path / "book",
        config="filename: book\ntitle: Engines\ncover: images/cover.png\n",
    )
    nested = root / "html" / "assets"
    nested.mkdir(parents=True)

    manifest = load_manifest(nested)

    assert manifest.source is SourceFormat.POLYTEX
    assert manifest.is_polytex and not manifest.is_markdown
    assert manifest.root == root.resolve()
    assert manifest.filename == "book"
    assert manifest.title == "Engines"
    assert manifest.author == "Ada Lovelace"
    assert manifest.frontmatter_present is True
    assert manifest.attributes == {"cover": "images/cover.png"}
    assert [(chapter.slug, chapter.chapter_number) for chapter in manifest.chapters] == [
        ("frontmatter", 0),
        ("intro", 1),
        ("setup", 2),
    ]
    assert manifest.chapters[1].sections[0].name == "Why"


def test_load_manifest_with_resolved_root_skips_discovery(tmp_path: Path) -> None:
    root = _polytex_book(tmp_path / "book")

    manifest = load_manifest(root=root, verify_paths=True)

    assert manifest.first_chapter is not None
    assert manifest.first_chapter.slug == "intro"


def test_load_polytex_manifest_aborts_on_missing_chapter(tmp_path: Path) -> None:
    root = _polytex_book(tmp_path / "book")
    (root / "chapters" / "setup.tex").unlink()

    with pytest.raises(ChapterFileMissing) as excinfo:
        load_manifest(root)

    assert excinfo.value.path == "chapters/setup.tex"


def test_load_polytex_manifest_requires_master_file(tmp_path: Path) -> None:
    root = tmp_path / "book"
    _write(root / "book.yml", "filename: missing\n")

    with pytest.raises(ManifestConfigError, match="Master file"):
        load_manifest(root)


def test_load_polytex_manifest_requires_book_yml(tmp_path: Path) -> None:
    root = tmp_path / "book"
    _write(root / "markdown" / "Book.txt", "intro.md\n")

    with pytest.raises(ManifestConfigError):
        load_manifest(root)


def test_load_markdown_manifest(tmp_path: Path) -> None:
    root = tmp_path / "mdbook"
    _write(root / "markdown" / "Book.txt", "intro.md\nnotes.txt\nsetup.md\n")

    manifest = load_manifest(root, source="md")

    assert manifest.is_markdown
    assert manifest.filename == "markdown/Book.txt"
    assert manifest.frontmatter_present is False
    assert [chapter.slug for chapter in manifest.chapters] == ["intro", "setup"]
    assert manifest.chapter_file_paths() == ["markdown/intro.md", "markdown/setup.md"]


def test_load_markdown_manifest_verifies_paths_on_request(tmp_path: Path) -> None:
    root = tmp_path / "mdbook"
    _write(root / "markdown" / "Book.txt", "intro.md\nsetup.md\n")
    _write(root / "markdown" / "intro.md", "# Intro\n")

    assert load_manifest(root, source=SourceFormat.MARKDOWN).chapters
    with pytest.raises(ChapterFileMissing, match="markdown/setup.md"):
        load_manifest(root, source=SourceFormat.MARKDOWN, verify_paths=True)


def test_load_manifest_without_root_marker(tmp_path: Path) -> None:
    start = tmp_path / "empty"
    start.mkdir()

    with pytest.raises(ManifestNotFound):
        load_manifest(start)


def test_load_manifest_rejects_unknown_source(tmp_path: Path) -> None:
    root = _polytex_book(tmp_path / "book")

    with pytest.raises(ManifestNotFound):
        load_manifest(root, source="docx")


def test_load_polytex_manifest_with_numeric_title(tmp_path: Path) -> None:
    root = _polytex_book(tmp_path / "book", config="filename: book\ntitle: 1984\n")

    manifest = load_manifest(root=root)

    assert manifest.title == "1984"


def test_load_polytex_manifest_rejects_non_utf8_master(tmp_path: Path) -> None:
    root = tmp_path / "book"
    _write(root / "book.yml", "filename: book\n")
    (root / "book.tex").write_bytes(b"\\author{Jos\xe9}\n")

    with pytest.raises(ManifestConfigError, match="UTF-8"):
        load_manifest(root)
