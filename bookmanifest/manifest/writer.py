"""Persistence helpers for manifest navigation data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import Manifest


def manifest_payload(manifest: Manifest) -> dict[str, Any]:
    chapters: list[dict[str, Any]] = []
    for chapter in manifest.chapters:
        chapters.append(
            {
                "slug": chapter.slug,
                "title": chapter.title,
                "chapter_number": chapter.chapter_number,
                "source_path": None if chapter.is_frontmatter else manifest.chapter_file_path(chapter),
                "fragment_path": chapter.fragment_path,
                "sections": [section.model_dump(mode="json") for section in chapter.sections],
            }
        )
    return {
        "source": manifest.source.value,
        "filename": manifest.filename,
        "title": manifest.title,
        "subtitle": manifest.subtitle,
        "author": manifest.author,
        "frontmatter": manifest.frontmatter,
        "chapters": chapters,
    }


def write_manifest(manifest: Manifest, destination: Path) -> Path:
    """Serialize manifest navigation data to a JSON file."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8") as handle:
        json.dump(manifest_payload(manifest), handle, ensure_ascii=False, indent=2)
    return destination
