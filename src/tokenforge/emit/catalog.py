"""
Asset catalog serialization.

Turns a ColorCatalog into Contents.json files: one at the catalog root,
one per namespace folder, one per colorset.
"""

from __future__ import annotations

from pathlib import Path

from tokenforge.core.ir import CONTENTS_FILE, ColorCatalog

from .file_contents import FileContents


def catalog_files(catalog: ColorCatalog, catalog_dir: Path) -> list[FileContents]:
    """Serialize a color catalog rooted at ``catalog_dir``.

    Order: root marker, namespace folder markers, colorsets in input order.
    """
    files = [
        FileContents.from_json(catalog.root_marker.to_contents(), catalog_dir, CONTENTS_FILE)
    ]

    for marker in catalog.directory_markers:
        files.append(
            FileContents.from_json(
                marker.to_contents(),
                catalog_dir.joinpath(*marker.directory_path),
                CONTENTS_FILE,
            )
        )

    for entry in catalog.entries:
        files.append(
            FileContents.from_json(
                entry.to_contents(),
                catalog_dir.joinpath(*entry.relative_dir),
                CONTENTS_FILE,
            )
        )

    return files
