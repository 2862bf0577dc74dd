from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ManifestConfigError

YAML_PATH = Path("book.yml")
MD_PATH = Path("markdown") / "Book.txt"
ROOT_MARKERS = (YAML_PATH, MD_PATH)


class BookConfig(BaseModel):
    """Attributes declared in book.yml.

    Keys without a matching field are kept and surface through ``extras``.
    """

    model_config = ConfigDict(extra="allow")

    filename: str = Field(description="Master file stem, e.g. 'book' for book.tex.")
    title: str | None = Field(default=None)
    subtitle: str | None = Field(default=None)

    @field_validator("filename", mode="before")
    def _normalize_filename(cls, value: Any) -> str:
        text = str(value).strip() if value is not None else ""
        if not text:
            raise ValueError("filename cannot be empty")
        # Accept either 'book' or 'book.tex'.
        return text[:-4] if text.endswith(".tex") else text

    @field_validator("title", "subtitle", mode="before")
    def _stringify_scalar(cls, value: Any) -> str | None:
        # YAML reads titles like 1984 as numbers.
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @property
    def extras(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    @property
    def master_path(self) -> Path:
        return Path(f"{self.filename}.tex")


def load_book_config(root: str | Path) -> BookConfig:
    """Load book.yml from the resolved book root.

    Missing files, YAML that is not a mapping, and schema violations are all
    reported as ``ManifestConfigError``.
    """
    config_path = Path(root) / YAML_PATH
    if not config_path.exists():
        raise ManifestConfigError(f"Book configuration not found: {config_path}", path=str(config_path))

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ManifestConfigError(f"Invalid YAML in {config_path}", path=str(config_path)) from exc

    if not isinstance(data, dict):
        raise ManifestConfigError(f"{config_path} should define a mapping", path=str(config_path))

    try:
        return BookConfig(**{str(key): value for key, value in data.items()})
    except ValidationError as exc:
        raise ManifestConfigError(f"Invalid book configuration in {config_path}", path=str(config_path)) from exc
