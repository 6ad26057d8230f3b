import math
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError
from .ir import PartialAttributeSet

MANIFEST_FILE = "tokenforge.toml"


# =============================================================================
# Color Output Configuration
# =============================================================================


@dataclass
class ColorsOutputConfig:
    """
    Where and how color tokens are exported.

    Example tokenforge.toml:
        [ios.colors]
        assets_colors_dir = "Assets.xcassets/Colors"
        group_using_namespace = true
        color_swift = "Sources/UIColor+extension.swift"
    """

    assets_colors_dir: Path | None = None  # no catalog when unset
    group_using_namespace: bool = False
    assets_in_swift_package: bool = False
    assets_in_main_bundle: bool = True
    add_objc_attribute: bool = False
    allow_duplicate_colors: bool = False
    color_swift: Path | None = None  # UIKit extension
    swiftui_color_swift: Path | None = None  # SwiftUI extension
    templates_path: Path | None = None

    @property
    def use_asset_catalog(self) -> bool:
        return self.assets_colors_dir is not None


# =============================================================================
# Typography Output Configuration
# =============================================================================


@dataclass
class TypographyOutputConfig:
    """Where text style sources are written and which defaults apply."""

    font_swift: Path | None = None  # UIKit UIFont extension
    swiftui_font_swift: Path | None = None  # SwiftUI Font extension
    labels_directory: Path | None = None  # TextStyles.swift with resolved attributes
    line_height_ratios: dict[str, float] = field(default_factory=dict)
    defaults: PartialAttributeSet = field(default_factory=PartialAttributeSet)
    templates_path: Path | None = None


@dataclass
class ExportManifest:
    """
    Project manifest loaded from tokenforge.toml.

    Contains project metadata, the token document location and the
    per-surface output configuration.
    """

    name: str
    tokens_path: Path
    colors: ColorsOutputConfig = field(default_factory=ColorsOutputConfig)
    typography: TypographyOutputConfig = field(default_factory=TypographyOutputConfig)
    root: Path = field(default_factory=Path)

    def resolve_tokens_path(self) -> Path:
        return self.tokens_path if self.tokens_path.is_absolute() else self.root / self.tokens_path


def _table(data: dict[str, Any], key: str, section: str, path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{section}] in {path} must be a table, got {type(value).__name__}")
    return value


def _bool(data: dict[str, Any], key: str, default: bool, section: str, path: Path) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{section}.{key} in {path} must be true or false, got {value!r}")
    return value


def _str(data: dict[str, Any], key: str, default: str, section: str, path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{section}.{key} in {path} must be a string, got {value!r}")
    return value


def _optional_path(data: dict[str, Any], key: str, section: str, path: Path) -> Path | None:
    value = _str(data, key, "", section, path)
    return Path(value) if value else None


def load_manifest(path: Path) -> ExportManifest:
    """Load tokenforge.toml.

    Raises:
        ConfigError: If the file is missing, not valid TOML, or holds a
            value of the wrong type or an invalid attribute default.
    """
    if not path.exists():
        raise ConfigError(f"Manifest not found: {path}")

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    project = _table(data, "project", "project", path)
    tokens = _table(data, "tokens", "tokens", path)
    ios = _table(data, "ios", "ios", path)
    colors_data = _table(ios, "colors", "ios.colors", path)
    typography_data = _table(ios, "typography", "ios.typography", path)

    templates_path = _optional_path(ios, "templates_path", "ios", path)
    if templates_path and not templates_path.is_absolute():
        templates_path = path.parent / templates_path

    section = "ios.colors"
    colors_config = ColorsOutputConfig(
        assets_colors_dir=_optional_path(colors_data, "assets_colors_dir", section, path),
        group_using_namespace=_bool(colors_data, "group_using_namespace", False, section, path),
        assets_in_swift_package=_bool(
            colors_data, "assets_in_swift_package", False, section, path
        ),
        assets_in_main_bundle=_bool(colors_data, "assets_in_main_bundle", True, section, path),
        add_objc_attribute=_bool(colors_data, "add_objc_attribute", False, section, path),
        allow_duplicate_colors=_bool(
            colors_data, "allow_duplicate_colors", False, section, path
        ),
        color_swift=_optional_path(colors_data, "color_swift", section, path),
        swiftui_color_swift=_optional_path(colors_data, "swiftui_color_swift", section, path),
        templates_path=templates_path,
    )

    section = "ios.typography"
    try:
        defaults = PartialAttributeSet(
            **_table(typography_data, "defaults", f"{section}.defaults", path)
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid [{section}.defaults] in {path}: {e}") from e

    ratios = _table(typography_data, "line_height_ratios", f"{section}.line_height_ratios", path)
    if any(
        isinstance(v, bool) or not isinstance(v, int | float) or not math.isfinite(v) or v <= 0
        for v in ratios.values()
    ):
        raise ConfigError(f"line_height_ratios in {path} must be positive numbers")

    typography_config = TypographyOutputConfig(
        font_swift=_optional_path(typography_data, "font_swift", section, path),
        swiftui_font_swift=_optional_path(typography_data, "swiftui_font_swift", section, path),
        labels_directory=_optional_path(typography_data, "labels_directory", section, path),
        line_height_ratios={k: float(v) for k, v in ratios.items()},
        defaults=defaults,
        templates_path=templates_path,
    )

    return ExportManifest(
        name=_str(project, "name", "unnamed", "project", path),
        tokens_path=Path(_str(tokens, "path", "tokens.yaml", "tokens", path)),
        colors=colors_config,
        typography=typography_config,
        root=path.parent,
    )
