"""
Typography exporter.

Produces the UIKit and SwiftUI font extensions, a TextStyles.swift file
holding one attribute value per style, and label and button classes that
apply a style chosen by name. The generated lookup is a plain switch over
known names, so asking for an unknown style returns nil instead of
crashing at runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tokenforge.core.font_metrics import FontMetricsProvider, StaticFontMetrics
from tokenforge.core.ir import StyleAttributeSet, TextStyle
from tokenforge.core.manifest import TypographyOutputConfig
from tokenforge.core.style_engine import StyleRegistry, build_style_registry

from .file_contents import FileContents
from .naming import unique_swift_identifiers
from .templates import create_template_env, render_template

logger = logging.getLogger(__name__)

UIFONT_TEMPLATE = "UIFont+extension.swift.jinja"
SWIFTUI_FONT_TEMPLATE = "Font+extension.swift.jinja"
TEXT_STYLES_TEMPLATE = "TextStyles.swift.jinja"
TEXT_STYLES_FILE = "TextStyles.swift"

# Rendered into labels_directory next to TextStyles.swift
LABEL_TEMPLATES = {
    "StyledLabel.swift": "StyledLabel.swift.jinja",
    "StyledButton.swift": "StyledButton.swift.jinja",
}


def _attributes_context(attributes: StyleAttributeSet) -> dict[str, Any]:
    def case(value: Any) -> str | None:
        return value.swift_case if value is not None else None

    return {
        "font_name": attributes.font_name,
        "font_size": attributes.font_size,
        "line_height": attributes.line_height,
        "line_break_mode": case(attributes.line_break_mode),
        "text_alignment": case(attributes.text_alignment),
        "strikethrough_style": case(attributes.strikethrough_style),
        "underline_style": case(attributes.underline_style),
        "letter_spacing": attributes.letter_spacing,
    }


class TypographyExporter:
    """Exports text styles according to a TypographyOutputConfig."""

    def __init__(
        self,
        output: TypographyOutputConfig,
        metrics: FontMetricsProvider | None = None,
    ):
        self.output = output
        self.metrics = metrics or StaticFontMetrics(output.line_height_ratios)
        self.env = create_template_env(output.templates_path)

    def build_registry(self, text_styles: Sequence[TextStyle]) -> StyleRegistry:
        return build_style_registry(
            text_styles, defaults=self.output.defaults, metrics=self.metrics
        )

    def export(self, text_styles: Sequence[TextStyle]) -> list[FileContents]:
        """Build every configured typography output; unset targets are skipped."""
        files: list[FileContents] = []
        registry = self.build_registry(text_styles)
        identifiers = unique_swift_identifiers(registry.names())

        styles = [
            {
                "name": identifiers[name],
                "style_name": name,
                **_attributes_context(attributes),
            }
            for name, attributes in registry.items()
        ]
        context = {"styles": styles}

        if self.output.font_swift:
            text = render_template(self.env, UIFONT_TEMPLATE, context)
            files.append(FileContents.from_text(text, self.output.font_swift))

        if self.output.swiftui_font_swift:
            text = render_template(self.env, SWIFTUI_FONT_TEMPLATE, context)
            files.append(FileContents.from_text(text, self.output.swiftui_font_swift))

        if self.output.labels_directory:
            labels_dir = self.output.labels_directory
            text = render_template(self.env, TEXT_STYLES_TEMPLATE, context)
            files.append(FileContents.from_text(text, labels_dir / TEXT_STYLES_FILE))
            for file_name, template in LABEL_TEMPLATES.items():
                text = render_template(self.env, template, context)
                files.append(FileContents.from_text(text, labels_dir / file_name))

        logger.info(f"Exported {len(styles)} text styles into {len(files)} files")
        return files
