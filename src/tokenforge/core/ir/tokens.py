"""
Design token IR types.

Passive, immutable data handed over by the upstream design-tool client:
colors (optionally paired light/dark) and text styles.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .attributes import LineBreakMode, TextAlignment, UnderlineStyle

# =============================================================================
# Colors
# =============================================================================


def clamp_channel(value: float) -> float:
    """Clamp a color channel to the closed range [0, 1]."""
    return min(1.0, max(0.0, float(value)))


class Color(BaseModel):
    """
    A single color token.

    Example:
        Color(name="brand", original_name="ui/brand", red=1.0, green=0.0, blue=0.0)
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(min_length=1, description="Normalized identifier, unique per catalog")
    original_name: str = Field(
        default="", description="Raw hierarchical name, may contain '/' separators"
    )
    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @model_validator(mode="before")
    @classmethod
    def _default_original_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("original_name"):
            return {**data, "original_name": data.get("name", "")}
        return data

    @classmethod
    def from_components(
        cls,
        name: str,
        red: float,
        green: float,
        blue: float,
        alpha: float = 1.0,
        *,
        original_name: str | None = None,
        clamp: bool = False,
    ) -> Color:
        """Build a Color, optionally clamping channels into [0, 1] first.

        Without ``clamp`` an out-of-range channel fails validation.
        """
        channels = (red, green, blue, alpha)
        if clamp:
            channels = tuple(clamp_channel(c) for c in channels)
        r, g, b, a = channels
        return cls(
            name=name,
            original_name=original_name or name,
            red=r,
            green=g,
            blue=b,
            alpha=a,
        )

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


class ColorPair(BaseModel):
    """A light color with an optional dark-appearance counterpart."""

    model_config = ConfigDict(frozen=True)

    light: Color
    dark: Color | None = None

    @model_validator(mode="after")
    def _check_pairing(self) -> ColorPair:
        if self.dark is None:
            return self
        if self.dark.name != self.light.name:
            raise ValueError(
                f"dark color '{self.dark.name}' does not match light color '{self.light.name}'"
            )
        if self.dark.original_name != self.light.original_name:
            raise ValueError(
                f"dark color original name '{self.dark.original_name}' does not match "
                f"'{self.light.original_name}'"
            )
        return self

    @property
    def name(self) -> str:
        return self.light.name

    @property
    def original_name(self) -> str:
        return self.light.original_name

    @property
    def has_dark_variant(self) -> bool:
        return self.dark is not None


# =============================================================================
# Typography
# =============================================================================


class TextStyle(BaseModel):
    """
    Text style token.

    ``line_height`` is absolute (points), not a multiple. The optional
    alignment, break mode and decoration fields are style-level values that
    sit between per-instance overrides and caller defaults.

    Example:
        TextStyle(name="body", font_name="Helvetica", font_size=14, line_height=20)
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(min_length=1)
    font_name: str = Field(min_length=1)
    font_size: float = Field(gt=0)
    line_height: float | None = Field(default=None, gt=0)
    letter_spacing: float | None = None
    text_alignment: TextAlignment | None = None
    line_break_mode: LineBreakMode | None = None
    underline_style: UnderlineStyle | None = None
    strikethrough_style: UnderlineStyle | None = None
