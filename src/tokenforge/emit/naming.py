"""
Swift identifier helpers.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from tokenforge.core.errors import DuplicateTokenError, ErrorContext

_WORDS = re.compile(r"\d+[a-z]*|[A-Z]?[a-z]+|[A-Z]+(?![a-z])")

# Reserved words that need backticks when used as identifiers
_SWIFT_KEYWORDS = frozenset(
    {
        "associatedtype", "break", "case", "catch", "class", "continue", "default",
        "defer", "deinit", "do", "else", "enum", "extension", "fallthrough", "false",
        "fileprivate", "for", "func", "guard", "if", "import", "in", "init", "inout",
        "internal", "is", "let", "nil", "open", "operator", "private", "protocol",
        "public", "repeat", "rethrows", "return", "self", "static", "struct",
        "subscript", "super", "switch", "throws", "true", "try", "typealias", "var",
        "where", "while",
    }
)


def to_swift_identifier(name: str) -> str:
    """
    Convert a token name to a lower camel case Swift identifier.

    Examples:
        >>> to_swift_identifier("ui/brand-primary")
        'uiBrandPrimary'
        >>> to_swift_identifier("backgroundSecondary")
        'backgroundSecondary'
        >>> to_swift_identifier("2xl")
        '_2xl'
        >>> to_swift_identifier("default")
        '`default`'
    """
    words = _WORDS.findall(name)
    if not words:
        return "_"

    identifier = words[0].lower() + "".join(w[0].upper() + w[1:].lower() for w in words[1:])
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    if identifier in _SWIFT_KEYWORDS:
        identifier = f"`{identifier}`"
    return identifier


def unique_swift_identifiers(names: Iterable[str]) -> dict[str, str]:
    """Map token names to Swift identifiers, in input order.

    A repeated name maps to the same identifier. Two different names that
    convert to the same identifier would declare the same member twice.

    Raises:
        DuplicateTokenError: If distinct names share an identifier.
    """
    identifiers: dict[str, str] = {}
    owners: dict[str, str] = {}
    for name in names:
        if name in identifiers:
            continue
        identifier = to_swift_identifier(name)
        if identifier in owners:
            raise DuplicateTokenError(
                f"Swift identifier '{identifier}' is already used by '{owners[identifier]}'",
                ErrorContext(token=name),
            )
        owners[identifier] = name
        identifiers[name] = identifier
    return identifiers
