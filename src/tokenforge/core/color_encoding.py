"""
Color channel encoding.

Converts a Color into the two string encodings the exporters need:
hex components for asset catalog descriptors and fixed-precision decimal
components for constants embedded directly in source.
"""

from __future__ import annotations

import math

from .ir import Color, ColorComponents


def channel_to_byte(value: float) -> int:
    """Scale a [0, 1] channel to 0-255, rounding halves away from zero."""
    return int(math.floor(value * 255 + 0.5))


def channel_to_hex(value: float) -> str:
    """Encode a [0, 1] channel as two uppercase hex digits.

    Args:
        value: Channel value in [0, 1].

    Returns:
        Two-digit hex string, e.g. "00", "80", "FF".
    """
    return f"{channel_to_byte(value):02X}"


def format_decimal(value: float) -> str:
    return f"{value:.3f}"


def to_hex_components(color: Color) -> ColorComponents:
    """Encode a color for an asset catalog descriptor.

    Color channels become ``0x``-prefixed hex bytes. Alpha stays a
    3-decimal float string, which is what catalog files carry.

    Args:
        color: Color with channels already in [0, 1].

    Returns:
        ColorComponents like red="0xFF", alpha="1.000".
    """
    return ColorComponents(
        red=f"0x{channel_to_hex(color.red)}",
        green=f"0x{channel_to_hex(color.green)}",
        blue=f"0x{channel_to_hex(color.blue)}",
        alpha=format_decimal(color.alpha),
    )


def to_decimal_components(color: Color) -> ColorComponents:
    """Encode a color as 3-decimal strings for inline source constants.

    Args:
        color: Color with channels already in [0, 1].

    Returns:
        ColorComponents like red="1.000", green="0.502".
    """
    return ColorComponents(
        red=format_decimal(color.red),
        green=format_decimal(color.green),
        blue=format_decimal(color.blue),
        alpha=format_decimal(color.alpha),
    )
