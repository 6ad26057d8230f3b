"""
Error types for tokenforge token loading, catalog assembly, and emission.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokenForgeError(Exception):
    """Base exception for all tokenforge errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class MalformedTokenError(TokenForgeError):
    """
    Raised when a design token fails boundary validation.

    Examples:
    - Color channel or alpha outside [0, 1]
    - Non-positive font size or line height
    - Token document that is not a mapping of token lists
    """

    pass


class NamespaceError(TokenForgeError):
    """
    Raised when a hierarchical color name cannot be mapped to a catalog path.

    Examples:
    - Trailing separator ("brand/")
    - Empty segment ("ui//brand")
    """

    pass


class DuplicateAssetError(TokenForgeError):
    """Raised when two colors resolve to the same catalog directory and leaf name."""

    pass


class DuplicateTokenError(TokenForgeError):
    """Raised when two text styles share a name."""

    pass


class UnknownStyleError(TokenForgeError):
    """Raised when a style name is not present in a StyleRegistry."""

    pass


class ConfigError(TokenForgeError):
    """Raised when tokenforge.toml is missing or invalid."""

    pass


class EmissionError(TokenForgeError):
    """
    Raised when an exporter fails to produce output.

    Examples:
    - Missing template
    - Template rendering errors
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        token: Name of the offending token
        source: Optional path of the document the token came from
        index: Optional position of the token in its list (0-indexed)
    """

    token: str
    source: Path | None = None
    index: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens.yaml [3] 'ui/brand'"
        """
        parts: list[str] = []
        if self.source:
            parts.append(str(self.source))
        if self.index is not None:
            parts.append(f"[{self.index}]")
        parts.append(f"'{self.token}'")
        return " ".join(parts)


def make_token_error(
    message: str,
    token: str,
    source: Path | None = None,
    index: int | None = None,
) -> MalformedTokenError:
    """
    Helper to create a MalformedTokenError with context.

    Args:
        message: Error description
        token: Token name
        source: Optional source file path
        index: Optional position in the token list

    Returns:
        MalformedTokenError with context attached
    """
    context = ErrorContext(token=token, source=source, index=index)
    return MalformedTokenError(message, context)
