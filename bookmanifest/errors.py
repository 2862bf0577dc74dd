"""Exceptions raised while resolving a book manifest."""

from __future__ import annotations


class ManifestError(Exception):
    """Base class for manifest resolution failures."""


class ManifestNotFound(ManifestError):
    """Raised when no book root marker exists up to the filesystem root."""

    def __init__(self, message: str = "Invalid book directory, no manifest file found!") -> None:
        super().__init__(message)


class ChapterFileMissing(ManifestError):
    """Raised when a chapter file referenced by the manifest does not exist."""

    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(message or f"Chapter file in manifest not found in {path}")
        self.path = path


class ManifestConfigError(ManifestError, ValueError):
    """Raised when book.yml or the master file cannot be used."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
