"""
tokenforge intermediate representation.

Immutable pydantic models for design tokens, resolved text attributes and
asset catalog descriptors.
"""

from .attributes import (
    LineBreakMode,
    PartialAttributeSet,
    StyleAttributeSet,
    TextAlignment,
    UnderlineStyle,
)
from .catalog import (
    COLORSET_SUFFIX,
    CONTENTS_FILE,
    Appearance,
    ColorCatalog,
    ColorCatalogEntry,
    ColorComponents,
    ColorVariant,
    DirectoryMarker,
    RootMarker,
)
from .tokens import Color, ColorPair, TextStyle, clamp_channel

__all__ = [
    # Tokens
    "Color",
    "ColorPair",
    "TextStyle",
    "clamp_channel",
    # Attributes
    "TextAlignment",
    "LineBreakMode",
    "UnderlineStyle",
    "PartialAttributeSet",
    "StyleAttributeSet",
    # Catalog
    "Appearance",
    "ColorComponents",
    "ColorVariant",
    "ColorCatalogEntry",
    "DirectoryMarker",
    "RootMarker",
    "ColorCatalog",
    "CONTENTS_FILE",
    "COLORSET_SUFFIX",
]
