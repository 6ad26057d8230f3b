"""
Swift and asset catalog emission.

Usage:
    from tokenforge.emit import ColorExporter, TypographyExporter

    files = ColorExporter(manifest.colors).export(tokens.colors)
    files += TypographyExporter(manifest.typography).export(tokens.text_styles)
"""

from .catalog import catalog_files
from .colors import ColorExporter
from .file_contents import Destination, FileContents
from .naming import to_swift_identifier, unique_swift_identifiers
from .templates import TEMPLATES_DIR, create_template_env, render_template
from .typography import TypographyExporter

__all__ = [
    "ColorExporter",
    "TypographyExporter",
    "catalog_files",
    "Destination",
    "FileContents",
    "to_swift_identifier",
    "unique_swift_identifiers",
    "TEMPLATES_DIR",
    "create_template_env",
    "render_template",
]
