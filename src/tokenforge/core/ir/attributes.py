"""
Text attribute IR types.

Paragraph and character attributes produced by the style composition
engine, plus the partial sets used for overrides and defaults.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


def _swift_case(value: str) -> str:
    head, *rest = value.split("_")
    return head + "".join(part.capitalize() for part in rest)


class TextAlignment(StrEnum):
    """Paragraph alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "justified"
    NATURAL = "natural"

    @property
    def swift_case(self) -> str:
        return _swift_case(self.value)


class LineBreakMode(StrEnum):
    """Wrapping and truncation behaviour for a paragraph."""

    BY_WORD_WRAPPING = "by_word_wrapping"
    BY_CHAR_WRAPPING = "by_char_wrapping"
    BY_CLIPPING = "by_clipping"
    BY_TRUNCATING_HEAD = "by_truncating_head"
    BY_TRUNCATING_TAIL = "by_truncating_tail"
    BY_TRUNCATING_MIDDLE = "by_truncating_middle"

    @property
    def swift_case(self) -> str:
        return _swift_case(self.value)


class UnderlineStyle(StrEnum):
    """Line style used for both underline and strikethrough decorations."""

    SINGLE = "single"
    THICK = "thick"
    DOUBLE = "double"
    PATTERN_DOT = "pattern_dot"
    PATTERN_DASH = "pattern_dash"
    PATTERN_DASH_DOT = "pattern_dash_dot"
    PATTERN_DASH_DOT_DOT = "pattern_dash_dot_dot"
    BY_WORD = "by_word"

    @property
    def swift_case(self) -> str:
        return _swift_case(self.value)


# =============================================================================
# Attribute sets
# =============================================================================


class PartialAttributeSet(BaseModel):
    """
    A sparse set of attributes.

    Used both for per-instance overrides and for caller-supplied defaults.
    ``line_height`` is absolute; the engine derives the multiple.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")

    line_height: float | None = Field(default=None, gt=0)
    letter_spacing: float | None = None
    line_break_mode: LineBreakMode | None = None
    text_alignment: TextAlignment | None = None
    strikethrough_style: UnderlineStyle | None = None
    underline_style: UnderlineStyle | None = None


class StyleAttributeSet(BaseModel):
    """
    Fully resolved attributes for one text style.

    ``font_name`` and ``font_size`` carry the requested font so the
    rendering surface can apply its own fallback when the font is missing.
    ``line_height`` is the resolved absolute value; ``line_height_multiple``
    is derived from it with the metrics available at export time.
    Every other attribute is ``None`` when no tier supplied a value.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    font_name: str
    font_size: float
    line_height: float | None = None
    line_height_multiple: float | None = None
    line_break_mode: LineBreakMode | None = None
    text_alignment: TextAlignment | None = None
    strikethrough_style: UnderlineStyle | None = None
    underline_style: UnderlineStyle | None = None
    letter_spacing: float | None = None
