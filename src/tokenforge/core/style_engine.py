"""
Text style composition.

Resolves a TextStyle, optional per-instance overrides and optional
defaults into a StyleAttributeSet. Each attribute falls through the same
chain, highest precedence first:

1. instance override
2. value carried by the style token
3. caller default
4. None (the rendering surface keeps its own default)

Line height is the only derived attribute: the absolute value is
converted into a multiple of the font's natural line height.

Named styles are resolved up front into a StyleRegistry so lookups by
name are plain dictionary reads with a declared failure.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TypeVar

from .errors import DuplicateTokenError, ErrorContext, MalformedTokenError, UnknownStyleError
from .font_metrics import FontMetricsProvider, StaticFontMetrics
from .ir import PartialAttributeSet, StyleAttributeSet, TextStyle

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMPTY = PartialAttributeSet()


def _first_set(*values: T | None) -> T | None:
    for value in values:
        if value is not None:
            return value
    return None


def line_height_multiple(line_height: float, natural_line_height: float) -> float:
    """Convert an absolute line height to a multiple of the font's own.

    Kept in the two-step percentage form consuming code has always used;
    it equals ``line_height / natural_line_height`` within float tolerance.

    Raises:
        MalformedTokenError: If the natural line height is not positive.
    """
    if natural_line_height <= 0:
        raise MalformedTokenError(
            f"natural line height must be positive, got {natural_line_height}"
        )
    return ((100.0 * line_height) / natural_line_height) / 100


class StyleEngine:
    """Resolves text styles against a font metrics provider."""

    def __init__(self, metrics: FontMetricsProvider | None = None) -> None:
        self.metrics: FontMetricsProvider = metrics or StaticFontMetrics()

    def resolve(
        self,
        style: TextStyle,
        overrides: PartialAttributeSet | None = None,
        defaults: PartialAttributeSet | None = None,
    ) -> StyleAttributeSet:
        """Resolve one style into a fresh, immutable attribute set.

        Args:
            style: The style token.
            overrides: Values set at the call site; they win over everything.
            defaults: Values used only when neither the override nor the
                style supplies one.

        Returns:
            StyleAttributeSet for this combination of inputs.
        """
        over = overrides or _EMPTY
        base = defaults or _EMPTY

        line_height = _first_set(over.line_height, style.line_height, base.line_height)
        multiple = None
        if line_height is not None:
            natural = self.metrics.natural_line_height(style.font_name, style.font_size)
            multiple = line_height_multiple(line_height, natural)

        return StyleAttributeSet(
            font_name=style.font_name,
            font_size=style.font_size,
            line_height=line_height,
            line_height_multiple=multiple,
            line_break_mode=_first_set(
                over.line_break_mode, style.line_break_mode, base.line_break_mode
            ),
            text_alignment=_first_set(
                over.text_alignment, style.text_alignment, base.text_alignment
            ),
            strikethrough_style=_first_set(
                over.strikethrough_style, style.strikethrough_style, base.strikethrough_style
            ),
            underline_style=_first_set(
                over.underline_style, style.underline_style, base.underline_style
            ),
            letter_spacing=_first_set(
                over.letter_spacing, style.letter_spacing, base.letter_spacing
            ),
        )


def resolve_style(
    style: TextStyle,
    overrides: PartialAttributeSet | None = None,
    defaults: PartialAttributeSet | None = None,
    *,
    metrics: FontMetricsProvider | None = None,
) -> StyleAttributeSet:
    """Resolve a single style. See StyleEngine.resolve."""
    return StyleEngine(metrics).resolve(style, overrides, defaults)


# =============================================================================
# Registry
# =============================================================================


class StyleRegistry:
    """Precomputed attribute sets keyed by style name."""

    def __init__(self, resolved: dict[str, StyleAttributeSet], styles: dict[str, TextStyle]):
        self._resolved = resolved
        self._styles = styles

    def get(self, name: str) -> StyleAttributeSet:
        """Return the attribute set for a style name.

        Raises:
            UnknownStyleError: If no style with that name was registered.
        """
        try:
            return self._resolved[name]
        except KeyError:
            raise UnknownStyleError(
                "unknown style name", ErrorContext(token=name)
            ) from None

    def style(self, name: str) -> TextStyle:
        """Return the source token for a style name."""
        if name not in self._styles:
            raise UnknownStyleError("unknown style name", ErrorContext(token=name))
        return self._styles[name]

    def names(self) -> list[str]:
        return list(self._resolved)

    def items(self) -> Iterator[tuple[str, StyleAttributeSet]]:
        return iter(self._resolved.items())

    def __contains__(self, name: object) -> bool:
        return name in self._resolved

    def __iter__(self) -> Iterator[str]:
        return iter(self._resolved)

    def __len__(self) -> int:
        return len(self._resolved)


def build_style_registry(
    styles: Sequence[TextStyle],
    *,
    defaults: PartialAttributeSet | None = None,
    metrics: FontMetricsProvider | None = None,
) -> StyleRegistry:
    """Resolve every style once, keyed by name, preserving input order.

    Raises:
        DuplicateTokenError: If two styles share a name.
    """
    engine = StyleEngine(metrics)
    resolved: dict[str, StyleAttributeSet] = {}
    by_name: dict[str, TextStyle] = {}

    for index, style in enumerate(styles):
        if style.name in resolved:
            raise DuplicateTokenError(
                "text style name is defined more than once",
                ErrorContext(token=style.name, index=index),
            )
        resolved[style.name] = engine.resolve(style, defaults=defaults)
        by_name[style.name] = style

    logger.debug(f"Resolved {len(resolved)} text styles")
    return StyleRegistry(resolved, by_name)
