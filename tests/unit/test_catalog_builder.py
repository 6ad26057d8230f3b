"""Tests for color asset catalog assembly."""

from __future__ import annotations

import pytest

from tokenforge.core.catalog_builder import build_color_catalog, build_color_entry
from tokenforge.core.errors import DuplicateAssetError, NamespaceError
from tokenforge.core.ir import Appearance, DirectoryMarker


class TestBuildColorEntry:
    """Test single-entry construction."""

    def test_light_only_has_no_dark_variant(self, pair_factory):
        entry = build_color_entry(pair_factory("text", (0.0, 0.0, 0.0, 1.0)), True)
        assert len(entry.variants) == 1
        assert entry.variants[0].appearances == ()
        assert entry.dark_variants == ()

    def test_dark_variant_tagged(self, brand_pair):
        entry = build_color_entry(brand_pair, True)
        assert len(entry.variants) == 2
        assert entry.variants[0].appearances == ()
        assert entry.variants[1].appearances == (Appearance.DARK,)
        assert len(entry.dark_variants) == 1

    def test_identical_light_and_dark_still_two_variants(self, pair_factory):
        pair = pair_factory("same", (0.2, 0.2, 0.2, 1.0), (0.2, 0.2, 0.2, 1.0))
        entry = build_color_entry(pair, False)
        assert len(entry.variants) == 2
        assert entry.variants[0].components == entry.variants[1].components


class TestBuildColorCatalog:
    """Test full catalog construction."""

    def test_brand_scenario(self, brand_pair):
        catalog = build_color_catalog([brand_pair], group_using_namespace=True)

        assert catalog.directory_markers == (DirectoryMarker(directory_path=("ui",)),)
        assert len(catalog.entries) == 1

        entry = catalog.entries[0]
        assert entry.directory_path == ("ui",)
        assert entry.leaf_name == "brand"
        assert entry.asset_name == "brand.colorset"
        assert entry.variants[0].components.red == "0xFF"
        assert entry.variants[1].components.red == "0x80"
        assert entry.variants[1].is_dark

    def test_shared_folder_has_one_marker(self, pair_factory):
        pairs = [
            pair_factory("x", (1.0, 1.0, 1.0, 1.0), original_name="group/x"),
            pair_factory("y", (0.0, 0.0, 0.0, 1.0), original_name="group/y"),
        ]
        catalog = build_color_catalog(pairs, group_using_namespace=True)
        assert [m.directory_path for m in catalog.directory_markers] == [("group",)]

    def test_nested_folders_each_get_a_marker(self, pair_factory):
        pairs = [pair_factory("c", (1.0, 1.0, 1.0, 1.0), original_name="a/b/c")]
        catalog = build_color_catalog(pairs, group_using_namespace=True)
        assert [m.directory_path for m in catalog.directory_markers] == [("a",), ("a", "b")]

    def test_grouping_disabled_flattens(self, brand_pair):
        catalog = build_color_catalog([brand_pair], group_using_namespace=False)
        assert catalog.directory_markers == ()
        assert catalog.entries[0].location == ("brand",)

    def test_preserves_input_order(self, pair_factory):
        names = ["zeta", "alpha", "mid"]
        pairs = [pair_factory(n, (0.0, 0.0, 0.0, 1.0)) for n in names]
        catalog = build_color_catalog(pairs, group_using_namespace=False)
        assert [e.leaf_name for e in catalog.entries] == names

    def test_empty_input(self):
        catalog = build_color_catalog([], group_using_namespace=True)
        assert catalog.entries == ()
        assert catalog.directory_markers == ()
        assert catalog.root_marker is not None

    def test_duplicate_location_rejected(self, pair_factory):
        pairs = [
            pair_factory("brand", (1.0, 0.0, 0.0, 1.0), original_name="ui/brand"),
            pair_factory("uiBrand", (0.0, 1.0, 0.0, 1.0), original_name="ui/brand"),
        ]
        with pytest.raises(DuplicateAssetError):
            build_color_catalog(pairs, group_using_namespace=True)

    def test_duplicate_location_last_write_wins(self, pair_factory):
        pairs = [
            pair_factory("first", (1.0, 0.0, 0.0, 1.0)),
            pair_factory("brand", (1.0, 0.0, 0.0, 1.0)),
            pair_factory("brand", (0.0, 1.0, 0.0, 1.0)),
        ]
        catalog = build_color_catalog(pairs, group_using_namespace=False, allow_duplicates=True)

        assert [e.leaf_name for e in catalog.entries] == ["first", "brand"]
        assert catalog.find("brand").variants[0].components.green == "0xFF"

    def test_bad_namespace_propagates(self, pair_factory):
        pairs = [pair_factory("brand", (1.0, 0.0, 0.0, 1.0), original_name="ui/")]
        with pytest.raises(NamespaceError):
            build_color_catalog(pairs, group_using_namespace=True)

    def test_ungrouped_name_with_separator_rejected(self, pair_factory):
        pairs = [pair_factory("ui/brand", (1.0, 0.0, 0.0, 1.0))]
        with pytest.raises(NamespaceError):
            build_color_catalog(pairs, group_using_namespace=False)
