"""Tests for the token, attribute and catalog IR models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError


class TestColor:
    """Test Color and ColorPair validation."""

    def test_original_name_defaults_to_name(self):
        from tokenforge.core.ir import Color

        color = Color(name="brand", red=1.0, green=0.0, blue=0.0)
        assert color.original_name == "brand"
        assert color.alpha == 1.0

    def test_channel_out_of_range_rejected(self):
        from tokenforge.core.ir import Color

        with pytest.raises(ValidationError):
            Color(name="brand", red=1.2, green=0.0, blue=0.0)
        with pytest.raises(ValidationError):
            Color(name="brand", red=0.0, green=0.0, blue=0.0, alpha=-0.1)

    def test_from_components_clamps_when_asked(self):
        from tokenforge.core.ir import Color

        color = Color.from_components("brand", 1.0000001, -0.0001, 0.5, 1.5, clamp=True)
        assert color.rgba == (1.0, 0.0, 0.5, 1.0)

    def test_from_components_without_clamp_rejects(self):
        from tokenforge.core.ir import Color

        with pytest.raises(ValidationError):
            Color.from_components("brand", 1.5, 0.0, 0.0)

    def test_frozen(self):
        from tokenforge.core.ir import Color

        color = Color(name="brand", red=1.0, green=0.0, blue=0.0)
        with pytest.raises(ValidationError):
            color.red = 0.5  # type: ignore[misc]

    def test_pair_requires_matching_names(self):
        from tokenforge.core.ir import Color, ColorPair

        light = Color(name="brand", red=1.0, green=0.0, blue=0.0)
        dark = Color(name="accent", red=0.5, green=0.0, blue=0.0)
        with pytest.raises(ValidationError):
            ColorPair(light=light, dark=dark)

    def test_pair_properties(self, brand_pair):
        assert brand_pair.name == "brand"
        assert brand_pair.original_name == "ui/brand"
        assert brand_pair.has_dark_variant is True


class TestTextStyle:
    """Test TextStyle validation."""

    def test_non_positive_font_size_rejected(self):
        from tokenforge.core.ir import TextStyle

        with pytest.raises(ValidationError):
            TextStyle(name="body", font_name="Helvetica", font_size=0)

    def test_negative_letter_spacing_allowed(self):
        from tokenforge.core.ir import TextStyle

        style = TextStyle(name="title", font_name="Helvetica", font_size=28, letter_spacing=-0.4)
        assert style.letter_spacing == -0.4
        assert style.line_height is None

    def test_enum_values_from_strings(self):
        from tokenforge.core.ir import LineBreakMode, TextAlignment, TextStyle

        style = TextStyle(
            name="body",
            font_name="Helvetica",
            font_size=14,
            text_alignment="center",
            line_break_mode="by_truncating_tail",
        )
        assert style.text_alignment is TextAlignment.CENTER
        assert style.line_break_mode is LineBreakMode.BY_TRUNCATING_TAIL


class TestPartialAttributeSet:
    """Test override and default attribute sets."""

    def test_non_finite_rejected(self):
        from tokenforge.core.ir import PartialAttributeSet

        with pytest.raises(ValidationError):
            PartialAttributeSet(letter_spacing=float("nan"))

    def test_unknown_key_rejected(self):
        from tokenforge.core.ir import PartialAttributeSet

        with pytest.raises(ValidationError):
            PartialAttributeSet(alignment="center")


class TestAttributeEnums:
    """Test Swift case names."""

    def test_swift_cases(self):
        from tokenforge.core.ir import LineBreakMode, TextAlignment, UnderlineStyle

        assert LineBreakMode.BY_TRUNCATING_TAIL.swift_case == "byTruncatingTail"
        assert TextAlignment.CENTER.swift_case == "center"
        assert UnderlineStyle.PATTERN_DASH_DOT_DOT.swift_case == "patternDashDotDot"


class TestCatalogContents:
    """Test Contents.json documents produced by catalog IR types."""

    def test_root_marker(self):
        from tokenforge.core.ir import RootMarker

        assert RootMarker().to_contents() == {"info": {"author": "xcode", "version": 1}}

    def test_directory_marker_provides_namespace(self):
        from tokenforge.core.ir import DirectoryMarker

        contents = DirectoryMarker(directory_path=("ui",)).to_contents()
        assert contents["properties"] == {"provides-namespace": True}

    def test_variant_omits_empty_appearances(self):
        from tokenforge.core.ir import Appearance, ColorComponents, ColorVariant

        components = ColorComponents(red="0xFF", green="0x00", blue="0x00", alpha="1.000")
        light = ColorVariant(components=components).to_contents()
        dark = ColorVariant(components=components, appearances=(Appearance.DARK,)).to_contents()

        assert "appearances" not in light
        assert light["idiom"] == "universal"
        assert light["color"]["color-space"] == "srgb"
        assert dark["appearances"] == [{"appearance": "luminosity", "value": "dark"}]
