"""
Natural line heights for fonts.

The style engine needs a font's natural line height to turn an absolute
line height into a multiple. Generated sources compute the multiple on
device from the font that actually loaded; in process (validate, style,
tests) we use line-height-per-em ratios.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

logger = logging.getLogger(__name__)

SYSTEM_FONT_NAME = ".SFUI-Regular"

# Natural line height divided by point size (ascender + descender + leading)
DEFAULT_LINE_HEIGHT_RATIOS: dict[str, float] = {
    SYSTEM_FONT_NAME: 1.193,
    "SFProText-Regular": 1.193,
    "SFProDisplay-Regular": 1.193,
    "Helvetica": 1.075,
    "Helvetica-Bold": 1.075,
    "HelveticaNeue": 1.193,
    "HelveticaNeue-Medium": 1.193,
    "HelveticaNeue-Bold": 1.193,
    "Arial": 1.149,
    "ArialMT": 1.149,
    "Georgia": 1.136,
    "Menlo-Regular": 1.164,
    "Roboto-Regular": 1.172,
    "Inter-Regular": 1.21,
}


class FontMetricsProvider(Protocol):
    """Anything that can report a font's natural line height in points."""

    def natural_line_height(self, font_name: str, font_size: float) -> float: ...


class StaticFontMetrics:
    """
    Table-driven metrics.

    Fonts missing from the table fall back to the system font at the same
    point size, the same fallback a device applies when a named font
    cannot be loaded.
    """

    def __init__(
        self,
        ratios: Mapping[str, float] | None = None,
        *,
        include_defaults: bool = True,
        fallback_font: str = SYSTEM_FONT_NAME,
    ) -> None:
        self.ratios: dict[str, float] = dict(DEFAULT_LINE_HEIGHT_RATIOS) if include_defaults else {}
        if ratios:
            self.ratios.update(ratios)
        self.fallback_font = fallback_font
        self._reported: set[str] = set()

    def knows(self, font_name: str) -> bool:
        return font_name in self.ratios

    def natural_line_height(self, font_name: str, font_size: float) -> float:
        ratio = self.ratios.get(font_name)
        if ratio is None:
            if font_name not in self._reported:
                self._reported.add(font_name)
                logger.warning(
                    f"No line height ratio for font '{font_name}', using {self.fallback_font}; "
                    f"add it to [ios.typography.line_height_ratios]"
                )
            ratio = self.ratios.get(self.fallback_font, DEFAULT_LINE_HEIGHT_RATIOS[SYSTEM_FONT_NAME])
        return font_size * ratio


class FixedLineHeightMetrics:
    """Reports the same natural line height for every font."""

    def __init__(self, line_height: float) -> None:
        self.line_height = line_height

    def natural_line_height(self, font_name: str, font_size: float) -> float:
        return self.line_height
