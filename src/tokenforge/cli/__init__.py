"""
tokenforge CLI.

- export: colors / typography / all
- validate: check a token document against the manifest settings
- style: print the resolved attributes of one text style
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from tokenforge._version import get_version
from tokenforge.core.catalog_builder import build_color_catalog
from tokenforge.core.errors import TokenForgeError
from tokenforge.core.font_metrics import StaticFontMetrics
from tokenforge.core.manifest import MANIFEST_FILE
from tokenforge.core.style_engine import build_style_registry

from .export import export_app
from .utils import configure_logging, fail, load_project, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""tokenforge - design tokens to Xcode asset catalogs and Swift sources

Reads tokenforge.toml in the current directory unless --manifest is given.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """tokenforge CLI main callback for global options."""
    configure_logging(verbose)


app.add_typer(export_app, name="export")


@app.command(name="validate")
def validate_command(
    manifest_path: Path = typer.Option(  # noqa: B008
        Path(MANIFEST_FILE), "--manifest", "-m", help="Path to tokenforge.toml"
    ),
) -> None:
    """
    Validate tokens without writing anything.

    Builds the color catalog and resolves every text style so that name
    collisions, bad namespaces and malformed tokens are reported.
    """
    manifest, tokens = load_project(manifest_path)

    try:
        catalog = build_color_catalog(
            tokens.colors,
            manifest.colors.group_using_namespace,
            allow_duplicates=manifest.colors.allow_duplicate_colors,
        )
        registry = build_style_registry(
            tokens.text_styles,
            defaults=manifest.typography.defaults,
            metrics=StaticFontMetrics(manifest.typography.line_height_ratios),
        )
    except TokenForgeError as e:
        raise fail(f"Error: {e}") from e

    typer.echo(f"Colors:      {len(catalog.entries)} colorsets")
    typer.echo(f"Namespaces:  {len(catalog.directory_markers)} folders")
    typer.echo(f"Text styles: {len(registry)}")
    typer.echo("Tokens are valid")


@app.command(name="style")
def style_command(
    name: str = typer.Argument(..., help="Text style name"),
    manifest_path: Path = typer.Option(  # noqa: B008
        Path(MANIFEST_FILE), "--manifest", "-m", help="Path to tokenforge.toml"
    ),
) -> None:
    """Print the resolved attributes of a text style as JSON."""
    manifest, tokens = load_project(manifest_path)

    try:
        registry = build_style_registry(
            tokens.text_styles,
            defaults=manifest.typography.defaults,
            metrics=StaticFontMetrics(manifest.typography.line_height_ratios),
        )
        attributes = registry.get(name)
    except TokenForgeError as e:
        raise fail(f"Error: {e}") from e

    typer.echo(json.dumps(attributes.model_dump(mode="json"), indent=2))


def main() -> None:
    app()


__all__ = [
    "__version__",
    "app",
    "main",
    "export_app",
    "version_callback",
]
