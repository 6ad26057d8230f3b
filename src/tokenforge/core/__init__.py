"""Core tokenforge functionality: token IR, color encoding, catalog assembly, style composition."""

from . import ir
from .catalog_builder import build_color_catalog, build_color_entry
from .color_encoding import channel_to_hex, to_decimal_components, to_hex_components
from .errors import (
    ConfigError,
    DuplicateAssetError,
    DuplicateTokenError,
    EmissionError,
    ErrorContext,
    MalformedTokenError,
    NamespaceError,
    TokenForgeError,
    UnknownStyleError,
)
from .font_metrics import FixedLineHeightMetrics, FontMetricsProvider, StaticFontMetrics
from .namespace import DirectoryRegistry, NamespacePath, resolve_namespace
from .style_engine import (
    StyleEngine,
    StyleRegistry,
    build_style_registry,
    line_height_multiple,
    resolve_style,
)

__all__ = [
    "ir",
    # Errors
    "TokenForgeError",
    "MalformedTokenError",
    "NamespaceError",
    "DuplicateAssetError",
    "DuplicateTokenError",
    "UnknownStyleError",
    "ConfigError",
    "EmissionError",
    "ErrorContext",
    # Colors
    "channel_to_hex",
    "to_hex_components",
    "to_decimal_components",
    "NamespacePath",
    "DirectoryRegistry",
    "resolve_namespace",
    "build_color_entry",
    "build_color_catalog",
    # Typography
    "FontMetricsProvider",
    "StaticFontMetrics",
    "FixedLineHeightMetrics",
    "StyleEngine",
    "StyleRegistry",
    "build_style_registry",
    "line_height_multiple",
    "resolve_style",
]
