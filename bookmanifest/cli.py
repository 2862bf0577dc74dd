"""CLI entrypoints for inspecting book manifests."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from .errors import ChapterFileMissing, ManifestConfigError, ManifestNotFound
from .manifest import Manifest, SourceFormat, load_manifest, write_manifest
from .verify import verify_chapter_paths

console = Console()
app = typer.Typer(help="Resolve and inspect PolyTeX and Markdown book manifests.")


SourceOption = Annotated[
    SourceFormat,
    typer.Option("--source", "-s", help="Read a PolyTeX book.yml tree or a Markdown listing."),
]
DirectoryOption = Annotated[
    str | None,
    typer.Option("--dir", "-d", help="Directory to start searching for the book root."),
]


@app.command()
def chapters(
    source: SourceOption = SourceFormat.POLYTEX,
    directory: DirectoryOption = None,
) -> None:
    """List the chapters of the book in manifest order."""
    manifest = _load(source, directory)

    table = Table(title=manifest.title or manifest.filename)
    table.add_column("#", justify="right")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Sections", justify="right")
    for chapter in manifest.chapters:
        number = "" if chapter.chapter_number is None else str(chapter.chapter_number)
        table.add_row(number, chapter.slug, chapter.title or "", str(len(chapter.sections)))
    console.print(table)

    if manifest.author:
        console.print(f"[bold blue]Author[/]: {manifest.author}")
    console.print(f"[bold green]Book root[/]: {manifest.root}")


@app.command()
def verify(
    source: SourceOption = SourceFormat.POLYTEX,
    directory: DirectoryOption = None,
) -> None:
    """Check that every chapter file referenced by the manifest exists."""
    manifest = _load(source, directory)
    try:
        checked = verify_chapter_paths(manifest)
    except ChapterFileMissing as exc:
        console.print(f"[bold red]Missing chapter file[/]: {exc.path}")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold green]Verified[/]: {len(checked)} chapter file(s) present.")


@app.command()
def export(
    output: Annotated[
        Path,
        typer.Argument(..., help="Destination JSON file."),
    ],
    source: SourceOption = SourceFormat.POLYTEX,
    directory: DirectoryOption = None,
) -> None:
    """Write chapter navigation data as JSON."""
    manifest = _load(source, directory)
    path = write_manifest(manifest, output)
    console.print(f"[bold green]Manifest[/]: wrote {len(manifest.chapters)} chapter(s) to {path}")


def _load(source: SourceFormat, directory: str | None) -> Manifest:
    try:
        return load_manifest(directory, source=source)
    except ManifestNotFound as exc:
        console.print(f"[bold red]Book not found[/]: {exc}")
        raise typer.Exit(code=1) from exc
    except ChapterFileMissing as exc:
        console.print(f"[bold red]Missing chapter file[/]: {exc.path}")
        raise typer.Exit(code=1) from exc
    except ManifestConfigError as exc:
        console.print(f"[bold red]Invalid configuration[/]: {exc}")
        raise typer.Exit(code=1) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
