"""Pydantic models describing a resolved book manifest."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..markdown import MarkupPipeline, first_paragraph_html, render_markdown

FRONTMATTER_SLUG = "frontmatter"


class SourceFormat(str, Enum):
    """Which source tree the manifest was read from."""

    MARKDOWN = "markdown"
    POLYTEX = "polytex"

    @classmethod
    def coerce(cls, value: "SourceFormat | str") -> "SourceFormat":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text == "md":
            return cls.MARKDOWN
        return cls(text)


class Section(BaseModel):
    """A numbered subdivision of a chapter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Section title markup.")
    section_number: int = Field(ge=1, description="1-based position within the chapter.")


class Chapter(BaseModel):
    """One book division as listed in the manifest."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(description="Filesystem-safe identifier derived from the source filename.")
    title: Optional[str] = Field(default=None, description="Chapter title markup.")
    chapter_number: Optional[int] = Field(
        default=None,
        ge=0,
        description="0 for frontmatter, 1..N in include order; unset for Markdown listings.",
    )
    sections: list[Section] = Field(default_factory=list)

    _nodes: list[Any] = PrivateAttr(default_factory=list)

    @field_validator("slug")
    def _normalize_slug(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("slug cannot be empty")
        return cleaned

    @property
    def path(self) -> str:
        return f"chapters/{self.slug}.tex"

    @property
    def fragment_name(self) -> str:
        return f"{self.slug}_fragment.html"

    @property
    def fragment_path(self) -> str:
        return f"html/{self.fragment_name}"

    @property
    def is_frontmatter(self) -> bool:
        return FRONTMATTER_SLUG in self.slug

    @property
    def nodes(self) -> tuple[Any, ...]:
        """Snapshot of the nodes appended by downstream consumers."""
        return tuple(self._nodes)

    def append_node(self, node: Any) -> None:
        self._nodes.append(node)

    def menu_heading(self, pipeline: MarkupPipeline | None = None) -> str:
        """Return the chapter heading for the navigation menu.

        ``pipeline`` converts title markup to HTML; the shared Markdown
        renderer is used when none is given.
        """
        render = pipeline or render_markdown
        html = first_paragraph_html(render(self.title or ""))
        if not self.chapter_number:
            return html
        return f"Chapter {self.chapter_number}: {html}"


class Manifest(BaseModel):
    """Resolved description of a book's structure."""

    model_config = ConfigDict(frozen=True)

    source: SourceFormat = Field(default=SourceFormat.POLYTEX)
    filename: str = Field(description="Master file stem (PolyTeX) or listing path (Markdown).")
    root: Path = Field(description="Resolved book root directory.")
    title: Optional[str] = Field(default=None)
    subtitle: Optional[str] = Field(default=None)
    author: Optional[str] = Field(default=None)
    chapters: list[Chapter] = Field(default_factory=list)
    frontmatter: bool = Field(default=False)
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="book.yml keys without a dedicated field.",
    )

    @property
    def is_markdown(self) -> bool:
        return self.source is SourceFormat.MARKDOWN

    @property
    def is_polytex(self) -> bool:
        return self.source is SourceFormat.POLYTEX

    @property
    def frontmatter_present(self) -> bool:
        return self.frontmatter

    @property
    def first_chapter(self) -> Chapter | None:
        """Return the first full chapter, skipping any frontmatter."""
        index = 1 if self.frontmatter else 0
        if index < len(self.chapters):
            return self.chapters[index]
        return None

    @property
    def pdf_chapters(self) -> list[Chapter]:
        # Print output typesets the frontmatter on its own.
        return [chapter for chapter in self.chapters if not chapter.is_frontmatter]

    def chapter_file_path(self, chapter: Chapter) -> str:
        if self.is_markdown:
            return f"markdown/{chapter.slug}.md"
        return chapter.path

    def chapter_file_paths(self, on_each: Callable[[str], Any] | None = None) -> list[str]:
        """Return source paths for every PDF chapter, calling ``on_each`` per path."""
        paths: list[str] = []
        for chapter in self.pdf_chapters:
            file_path = self.chapter_file_path(chapter)
            if on_each is not None:
                on_each(file_path)
            paths.append(file_path)
        return paths

    def find_chapter_by_slug(self, slug: str) -> Chapter | None:
        return next((chapter for chapter in self.chapters if chapter.slug == slug), None)

    def find_chapter_by_number(self, number: int) -> Chapter | None:
        return next((chapter for chapter in self.chapters if chapter.chapter_number == number), None)

    def url(self, chapter_number: int) -> str:
        chapter = self.find_chapter_by_number(chapter_number)
        return chapter.slug if chapter is not None else "#"
