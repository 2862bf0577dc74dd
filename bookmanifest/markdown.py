"""Shared markup helpers used for navigation headings."""

from __future__ import annotations

from functools import lru_cache
from html.parser import HTMLParser
from typing import Callable, cast

from markdown_it import MarkdownIt
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin

MarkupPipeline = Callable[[str], str]


@lru_cache(maxsize=1)
def _renderer() -> MarkdownIt:
    """Configure and cache a CommonMark-compliant renderer."""
    md = MarkdownIt("commonmark", {"html": True, "linkify": True, "typographer": True})
    md.enable("table").enable("strikethrough")
    md.use(deflist_plugin)
    md.use(footnote_plugin)
    return md


def render_markdown(text: str) -> str:
    """Render Markdown to HTML using the shared renderer."""
    if not text.strip():
        return ""
    return cast(str, _renderer().render(text))


class _FirstParagraphCollector(HTMLParser):
    """Rebuild the inner markup of the first ``<p>`` element."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.parts: list[str] = []
        self.found = False
        self.done = False
        self._depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self.done:
            return
        if not self.found:
            if tag == "p":
                self.found = True
                self._depth = 1
            return
        if tag == "p":
            self._depth += 1
        self.parts.append(self.get_starttag_text() or f"<{tag}>")

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self.found and not self.done:
            self.parts.append(self.get_starttag_text() or f"<{tag} />")

    def handle_endtag(self, tag: str) -> None:
        if not self.found or self.done:
            return
        if tag == "p":
            self._depth -= 1
            if self._depth == 0:
                self.done = True
                return
        self.parts.append(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        if self.found and not self.done:
            self.parts.append(data)

    def handle_entityref(self, name: str) -> None:
        if self.found and not self.done:
            self.parts.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        if self.found and not self.done:
            self.parts.append(f"&#{name};")


def first_paragraph_html(html: str) -> str:
    """Return the inner markup of the first paragraph in ``html``.

    Falls back to the stripped input when no paragraph is present.
    """
    collector = _FirstParagraphCollector()
    collector.feed(html)
    collector.close()
    if not collector.found:
        return html.strip()
    return "".join(collector.parts).strip()
