"""
Export commands for tokenforge CLI.

- export colors: UIColor/Color extensions and the color asset catalog
- export typography: UIFont/Font extensions and TextStyles.swift
- export all: both of the above
"""

from __future__ import annotations

from pathlib import Path

import typer

from tokenforge.core.errors import TokenForgeError
from tokenforge.core.manifest import MANIFEST_FILE, ExportManifest
from tokenforge.core.token_loader import TokenSet
from tokenforge.core.writer import write_files
from tokenforge.emit import ColorExporter, FileContents, TypographyExporter

from .utils import fail, load_project

export_app = typer.Typer(
    help="Export design tokens to Swift sources and asset catalogs",
    no_args_is_help=True,
)

ManifestOption = typer.Option(  # noqa: B008
    Path(MANIFEST_FILE),
    "--manifest",
    "-m",
    help="Path to tokenforge.toml (or its folder)",
)
OutputRootOption = typer.Option(  # noqa: B008
    None,
    "--output-root",
    "-o",
    help="Folder relative output paths are resolved against (default: manifest folder)",
)
DryRunOption = typer.Option(
    False,
    "--dry-run",
    help="List the files that would be written without writing them",
)


def _colors(manifest: ExportManifest, tokens: TokenSet) -> list[FileContents]:
    return ColorExporter(manifest.colors).export(tokens.colors)


def _typography(manifest: ExportManifest, tokens: TokenSet) -> list[FileContents]:
    return TypographyExporter(manifest.typography).export(tokens.text_styles)


def _run(
    manifest_path: Path,
    output_root: Path | None,
    dry_run: bool,
    *,
    colors: bool,
    typography: bool,
) -> None:
    manifest, tokens = load_project(manifest_path)

    try:
        files: list[FileContents] = []
        if colors:
            files.extend(_colors(manifest, tokens))
        if typography:
            files.extend(_typography(manifest, tokens))
    except TokenForgeError as e:
        raise fail(f"Error: {e}") from e

    if not files:
        typer.echo("Nothing to export: no output targets configured")
        return

    root = output_root or manifest.root
    if dry_run:
        for contents in files:
            typer.echo(f"  {root / contents.destination.path}")
        typer.echo(f"{len(files)} files would be written")
        return

    try:
        written = write_files(files, root)
    except TokenForgeError as e:
        raise fail(f"Error: {e}") from e
    typer.echo(f"Wrote {len(written)} files to {root}")


@export_app.command(name="colors")
def export_colors(
    manifest_path: Path = ManifestOption,
    output_root: Path | None = OutputRootOption,
    dry_run: bool = DryRunOption,
) -> None:
    """
    Export color tokens.

    Examples:
        tokenforge export colors
        tokenforge export colors -m ios/tokenforge.toml --dry-run
    """
    _run(manifest_path, output_root, dry_run, colors=True, typography=False)


@export_app.command(name="typography")
def export_typography(
    manifest_path: Path = ManifestOption,
    output_root: Path | None = OutputRootOption,
    dry_run: bool = DryRunOption,
) -> None:
    """Export text style tokens."""
    _run(manifest_path, output_root, dry_run, colors=False, typography=True)


@export_app.command(name="all")
def export_all(
    manifest_path: Path = ManifestOption,
    output_root: Path | None = OutputRootOption,
    dry_run: bool = DryRunOption,
) -> None:
    """Export colors and text styles."""
    _run(manifest_path, output_root, dry_run, colors=True, typography=True)
