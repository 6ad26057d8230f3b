"""
Token document loading.

Reads the color and text style lists handed over by the design-tool
client. Documents are YAML (JSON is accepted as a YAML subset):

    colors:
      - name: brand
        original_name: ui/brand
        light: {red: 1.0, green: 0.0, blue: 0.0, alpha: 1.0}
        dark: "#800000"
    text_styles:
      - name: body
        font_name: Helvetica
        font_size: 14
        line_height: 20
        letter_spacing: 0.5

This is the input boundary: malformed tokens fail here with a
MalformedTokenError naming the token, before any encoding happens.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import MalformedTokenError, make_token_error
from .ir import Color, ColorPair, TextStyle

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#?(?P<rgb>[0-9a-fA-F]{6})(?P<alpha>[0-9a-fA-F]{2})?$")


@dataclass
class TokenSet:
    """Ordered token lists for a single export run."""

    colors: list[ColorPair] = field(default_factory=list)
    text_styles: list[TextStyle] = field(default_factory=list)
    source: Path | None = None


def parse_hex_color(value: str) -> dict[str, float]:
    """Parse "#RRGGBB" or "#RRGGBBAA" into channel values in [0, 1].

    Raises:
        ValueError: If the string is not a hex color.
    """
    match = _HEX_COLOR.match(value.strip())
    if not match:
        raise ValueError(f"not a hex color: {value!r}")
    rgb = match.group("rgb")
    channels = {
        "red": int(rgb[0:2], 16) / 255,
        "green": int(rgb[2:4], 16) / 255,
        "blue": int(rgb[4:6], 16) / 255,
    }
    alpha = match.group("alpha")
    channels["alpha"] = int(alpha, 16) / 255 if alpha else 1.0
    return channels


def _components(raw: Any) -> dict[str, Any]:
    if isinstance(raw, str):
        return parse_hex_color(raw)
    if isinstance(raw, dict):
        return dict(raw)
    raise ValueError(f"color value must be a mapping or hex string, got {type(raw).__name__}")


def _parse_color_pair(data: dict[str, Any]) -> ColorPair:
    name = data["name"]
    original_name = data.get("original_name") or name

    light = Color(name=name, original_name=original_name, **_components(data["light"]))
    dark = None
    if data.get("dark") is not None:
        dark = Color(name=name, original_name=original_name, **_components(data["dark"]))

    return ColorPair(light=light, dark=dark)


def parse_tokens(data: dict[str, Any], source: Path | None = None) -> TokenSet:
    """Parse a token document that has already been decoded.

    Raises:
        MalformedTokenError: If any token is missing fields or out of range.
    """
    if not isinstance(data, dict):
        raise MalformedTokenError(f"Token document must be a mapping, got {type(data).__name__}")

    token_set = TokenSet(source=source)

    for index, raw in enumerate(data.get("colors") or []):
        token_name = "?"
        if isinstance(raw, dict):
            token_name = raw.get("original_name") or raw.get("name", "?")
        try:
            token_set.colors.append(_parse_color_pair(raw))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            # pydantic ValidationError subclasses ValueError
            raise make_token_error(f"invalid color: {e}", token_name, source, index) from e

    for index, raw in enumerate(data.get("text_styles") or []):
        token_name = raw.get("name", "?") if isinstance(raw, dict) else "?"
        try:
            token_set.text_styles.append(TextStyle(**raw))
        except (ValidationError, TypeError) as e:
            raise make_token_error(f"invalid text style: {e}", token_name, source, index) from e

    logger.debug(
        f"Parsed {len(token_set.colors)} colors and {len(token_set.text_styles)} text styles"
    )
    return token_set


def load_tokens(path: Path) -> TokenSet:
    """Load a token document from disk.

    Raises:
        MalformedTokenError: If the file is missing, unparsable, or has
            invalid tokens.
    """
    if not path.exists():
        raise MalformedTokenError(f"Token document not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise MalformedTokenError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        logger.warning(f"Empty token document at {path}")
        return TokenSet(source=path)

    return parse_tokens(data, source=path)
