"""
Color exporter.

Produces the UIKit and SwiftUI color extensions plus the color asset
catalog for a list of color pairs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tokenforge.core.catalog_builder import build_color_catalog
from tokenforge.core.color_encoding import to_decimal_components
from tokenforge.core.errors import DuplicateTokenError, ErrorContext
from tokenforge.core.ir import ColorPair
from tokenforge.core.manifest import ColorsOutputConfig
from tokenforge.core.namespace import resolve_namespace

from .catalog import catalog_files
from .file_contents import FileContents
from .naming import unique_swift_identifiers
from .templates import create_template_env, render_template

logger = logging.getLogger(__name__)

UICOLOR_TEMPLATE = "UIColor+extension.swift.jinja"
SWIFTUI_COLOR_TEMPLATE = "Color+extension.swift.jinja"


class ColorExporter:
    """Exports color pairs according to a ColorsOutputConfig."""

    def __init__(self, output: ColorsOutputConfig):
        self.output = output
        self.env = create_template_env(output.templates_path)

    def export(self, color_pairs: Sequence[ColorPair]) -> list[FileContents]:
        """Build every configured color output.

        Outputs that have no configured path are skipped, so a config with
        no targets yields an empty list.
        """
        files: list[FileContents] = []
        catalog_contents: list[FileContents] = []

        if self.output.assets_colors_dir is not None:
            catalog = build_color_catalog(
                color_pairs,
                self.output.group_using_namespace,
                allow_duplicates=self.output.allow_duplicate_colors,
            )
            catalog_contents = catalog_files(catalog, self.output.assets_colors_dir)

        swift_pairs = self._unique_by_name(color_pairs)
        identifiers = unique_swift_identifiers(pair.name for pair in swift_pairs)

        if self.output.color_swift:
            context = self._uikit_context(swift_pairs, identifiers)
            text = render_template(self.env, UICOLOR_TEMPLATE, context)
            files.append(FileContents.from_text(text, self.output.color_swift))

        if self.output.swiftui_color_swift:
            context = self._swiftui_context(swift_pairs, identifiers)
            text = render_template(self.env, SWIFTUI_COLOR_TEMPLATE, context)
            files.append(FileContents.from_text(text, self.output.swiftui_color_swift))

        files.extend(catalog_contents)

        logger.info(f"Exported {len(color_pairs)} colors into {len(files)} files")
        return files

    def _unique_by_name(self, color_pairs: Sequence[ColorPair]) -> list[ColorPair]:
        """One pair per color name, since each name becomes one Swift member.

        A repeated name is an error unless duplicates are allowed, in which
        case the later pair replaces the earlier one in place.
        """
        by_name: dict[str, ColorPair] = {}
        for index, pair in enumerate(color_pairs):
            if pair.name in by_name and not self.output.allow_duplicate_colors:
                raise DuplicateTokenError(
                    "color name is defined more than once",
                    ErrorContext(token=pair.name, index=index),
                )
            by_name[pair.name] = pair
        return list(by_name.values())

    def _asset_name(self, pair: ColorPair) -> str:
        path = resolve_namespace(pair.name, pair.original_name, self.output.group_using_namespace)
        return "/".join(path.location)

    def _base_context(self) -> dict[str, Any]:
        return {
            "assets_in_swift_package": self.output.assets_in_swift_package,
            "assets_in_main_bundle": self.output.assets_in_main_bundle,
            "use_namespace": self.output.group_using_namespace,
        }

    def _uikit_context(
        self, color_pairs: Sequence[ColorPair], identifiers: dict[str, str]
    ) -> dict[str, Any]:
        use_assets = self.output.use_asset_catalog
        colors = []
        for pair in color_pairs:
            color: dict[str, Any] = {
                "name": identifiers[pair.name],
                "original_name": pair.original_name,
            }
            if use_assets:
                color["asset_name"] = self._asset_name(pair)
            else:
                color["light"] = to_decimal_components(pair.light).model_dump()
                color["dark"] = (
                    to_decimal_components(pair.dark).model_dump() if pair.dark else None
                )
                color["has_dark_variant"] = pair.dark is not None
            colors.append(color)

        return {
            **self._base_context(),
            "add_objc_attribute": self.output.add_objc_attribute,
            "color_from_asset_catalog": use_assets,
            "colors": colors,
        }

    def _swiftui_context(
        self, color_pairs: Sequence[ColorPair], identifiers: dict[str, str]
    ) -> dict[str, Any]:
        colors = [
            {
                "name": identifiers[pair.name],
                "original_name": pair.original_name,
                "asset_name": self._asset_name(pair),
            }
            for pair in color_pairs
        ]
        return {**self._base_context(), "colors": colors}
