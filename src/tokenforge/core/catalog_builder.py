"""
Color asset catalog assembly.

Turns an ordered list of ColorPair tokens into a ColorCatalog: one entry
per color (with a dark variant when the pair has one) plus one marker per
namespace folder.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .color_encoding import to_hex_components
from .errors import DuplicateAssetError, ErrorContext
from .ir import (
    Appearance,
    ColorCatalog,
    ColorCatalogEntry,
    ColorPair,
    ColorVariant,
    DirectoryMarker,
    RootMarker,
)
from .namespace import DirectoryRegistry, resolve_namespace

logger = logging.getLogger(__name__)


def build_color_entry(pair: ColorPair, group_using_namespace: bool) -> ColorCatalogEntry:
    """Build the catalog entry for a single color pair.

    The default variant is always present. A second variant tagged dark is
    added whenever the pair has a dark member, even if its values match
    the light one.
    """
    path = resolve_namespace(pair.name, pair.original_name, group_using_namespace)

    variants = [ColorVariant(components=to_hex_components(pair.light))]
    if pair.dark is not None:
        variants.append(
            ColorVariant(
                components=to_hex_components(pair.dark),
                appearances=(Appearance.DARK,),
            )
        )

    return ColorCatalogEntry(
        directory_path=path.directories,
        leaf_name=path.leaf_name,
        variants=tuple(variants),
    )


def build_color_catalog(
    color_pairs: Sequence[ColorPair],
    group_using_namespace: bool,
    *,
    allow_duplicates: bool = False,
) -> ColorCatalog:
    """Build a complete color asset catalog.

    Args:
        color_pairs: Colors in the order they should appear.
        group_using_namespace: Whether "/" in original names creates folders.
        allow_duplicates: If True, a later color that maps to the same
            location replaces the earlier entry (last write wins) and a
            warning is logged. Otherwise the collision is an error.

    Returns:
        ColorCatalog with entries in input order and deduplicated markers.

    Raises:
        NamespaceError: If a name cannot be mapped to a catalog path.
        DuplicateAssetError: If two colors collide and duplicates are not allowed.
    """
    entries: list[ColorCatalogEntry] = []
    positions: dict[tuple[str, ...], int] = {}
    sources: dict[tuple[str, ...], str] = {}
    directories = DirectoryRegistry()

    for pair in color_pairs:
        entry = build_color_entry(pair, group_using_namespace)
        location = entry.location

        if location in positions:
            previous = sources[location]
            if not allow_duplicates:
                raise DuplicateAssetError(
                    f"collides with '{previous}' at {'/'.join(location)}",
                    ErrorContext(token=pair.original_name),
                )
            logger.warning(
                f"Color '{pair.original_name}' overwrites '{previous}' at {'/'.join(location)}"
            )
            entries[positions[location]] = entry
        else:
            positions[location] = len(entries)
            entries.append(entry)
        sources[location] = pair.original_name

        directories.register(entry.directory_path)

    logger.debug(
        f"Built color catalog: {len(entries)} colorsets, {len(directories)} namespace folders"
    )

    return ColorCatalog(
        root_marker=RootMarker(),
        entries=tuple(entries),
        directory_markers=tuple(DirectoryMarker(directory_path=p) for p in directories.paths),
    )
