"""Book manifest resolution for PolyTeX and Markdown book trees."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as load_pkg_version
from pathlib import Path
import tomllib

from .errors import ChapterFileMissing, ManifestConfigError, ManifestError, ManifestNotFound
from .locator import find_book_root
from .manifest import Chapter, Manifest, Section, SourceFormat, load_manifest
from .verify import verify_chapter_paths

__all__ = [
    "__version__",
    "Chapter",
    "ChapterFileMissing",
    "Manifest",
    "ManifestConfigError",
    "ManifestError",
    "ManifestNotFound",
    "Section",
    "SourceFormat",
    "find_book_root",
    "load_manifest",
    "verify_chapter_paths",
]


def _read_local_project_version() -> str:
    """Read the project version from pyproject.toml when the package is uninstalled."""
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return "0.0.0"
    return data.get("project", {}).get("version", "0.0.0")


try:
    __version__ = load_pkg_version("bookmanifest")
except PackageNotFoundError:
    __version__ = _read_local_project_version()
