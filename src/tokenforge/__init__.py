"""
tokenforge - design tokens to Apple platform sources.

Turns color and text style tokens exported from a design tool into an
Xcode color asset catalog and UIKit/SwiftUI extensions.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    ConfigError,
    DuplicateAssetError,
    DuplicateTokenError,
    EmissionError,
    MalformedTokenError,
    NamespaceError,
    TokenForgeError,
    UnknownStyleError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokenForgeError",
    "MalformedTokenError",
    "NamespaceError",
    "DuplicateAssetError",
    "DuplicateTokenError",
    "UnknownStyleError",
    "ConfigError",
    "EmissionError",
]
