"""Shared pytest fixtures for tokenforge tests."""

from pathlib import Path

import pytest

from tokenforge.core.font_metrics import FixedLineHeightMetrics
from tokenforge.core.ir import Color, ColorPair, TextStyle

SAMPLE_TOKENS = """
colors:
  - name: brand
    original_name: ui/brand
    light: {red: 1.0, green: 0.0, blue: 0.0, alpha: 1.0}
    dark: {red: 0.5, green: 0.0, blue: 0.0, alpha: 1.0}
  - name: background
    original_name: surface/background
    light: "#FFFFFF"
  - name: text
    light: {red: 0.0, green: 0.0, blue: 0.0}
text_styles:
  - name: body
    font_name: Helvetica
    font_size: 14
    line_height: 20
    letter_spacing: 0.5
  - name: caption
    font_name: NotARealFont
    font_size: 11
"""

SAMPLE_MANIFEST = """
[project]
name = "Sample"

[tokens]
path = "tokens.yaml"

[ios.colors]
assets_colors_dir = "Assets.xcassets/Colors"
group_using_namespace = true
color_swift = "Sources/UIColor+extension.swift"
swiftui_color_swift = "Sources/Color+extension.swift"

[ios.typography]
font_swift = "Sources/UIFont+extension.swift"
swiftui_font_swift = "Sources/Font+extension.swift"
labels_directory = "Sources/Labels"

[ios.typography.defaults]
line_break_mode = "by_truncating_tail"
"""


def make_pair(
    name: str,
    light: tuple[float, float, float, float],
    dark: tuple[float, float, float, float] | None = None,
    original_name: str | None = None,
) -> ColorPair:
    """Build a ColorPair from RGBA tuples."""
    original = original_name or name
    channels = ("red", "green", "blue", "alpha")
    light_color = Color(name=name, original_name=original, **dict(zip(channels, light)))
    dark_color = None
    if dark is not None:
        dark_color = Color(name=name, original_name=original, **dict(zip(channels, dark)))
    return ColorPair(light=light_color, dark=dark_color)


@pytest.fixture
def pair_factory():
    """Return the make_pair helper."""
    return make_pair


@pytest.fixture
def brand_pair() -> ColorPair:
    """The ui/brand color with a dark variant."""
    return make_pair(
        "brand", (1.0, 0.0, 0.0, 1.0), (0.5, 0.0, 0.0, 1.0), original_name="ui/brand"
    )


@pytest.fixture
def body_style() -> TextStyle:
    """Helvetica body style with absolute line height."""
    return TextStyle(
        name="body", font_name="Helvetica", font_size=14, line_height=20, letter_spacing=0.5
    )


@pytest.fixture
def fixed_metrics() -> FixedLineHeightMetrics:
    """Metrics that report a natural line height of 20pt for every font."""
    return FixedLineHeightMetrics(20.0)


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a project folder with tokenforge.toml and tokens.yaml."""
    (tmp_path / "tokens.yaml").write_text(SAMPLE_TOKENS)
    (tmp_path / "tokenforge.toml").write_text(SAMPLE_MANIFEST)
    return tmp_path
