"""Manifest data structures and loaders."""

from .latex import parse_latex_book, strip_frontmatter
from .listing import parse_listing
from .loader import load_manifest
from .models import Chapter, Manifest, Section, SourceFormat
from .writer import write_manifest

__all__ = [
    "Chapter",
    "Manifest",
    "Section",
    "SourceFormat",
    "load_manifest",
    "parse_latex_book",
    "parse_listing",
    "strip_frontmatter",
    "write_manifest",
]
