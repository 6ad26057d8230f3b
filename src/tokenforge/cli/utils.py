"""
tokenforge CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import os
import platform
from pathlib import Path

import typer

from tokenforge._version import get_version
from tokenforge.core.errors import TokenForgeError
from tokenforge.core.manifest import MANIFEST_FILE, ExportManifest, load_manifest
from tokenforge.core.token_loader import TokenSet, load_tokens

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from LOG_LEVEL, or DEBUG when verbose."""
    log_level = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format=LOG_FORMAT,
    )


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokenforge version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def fail(message: str) -> typer.Exit:
    """Print an error to stderr and return the Exit to raise."""
    typer.echo(message, err=True)
    return typer.Exit(code=1)


def load_project(manifest_path: Path) -> tuple[ExportManifest, TokenSet]:
    """Load the manifest and its token document, exiting on failure."""
    if manifest_path.is_dir():
        manifest_path = manifest_path / MANIFEST_FILE

    try:
        manifest = load_manifest(manifest_path)
        tokens = load_tokens(manifest.resolve_tokens_path())
    except TokenForgeError as e:
        raise fail(f"Error: {e}") from e

    return manifest, tokens
