"""
Asset catalog IR types.

Structural descriptors produced by the color catalog builder. They carry
no file I/O and no JSON; the emission layer turns them into Contents.json
documents under an .xcassets folder.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CONTENTS_FILE = "Contents.json"
COLORSET_SUFFIX = ".colorset"

_CATALOG_INFO: dict[str, Any] = {"author": "xcode", "version": 1}


class Appearance(StrEnum):
    """Appearance tags attached to a color variant."""

    DARK = "dark"

    def to_contents(self) -> dict[str, str]:
        return {"appearance": "luminosity", "value": self.value}


class ColorComponents(BaseModel):
    """Encoded channel strings, either hex ("0xFF") or decimal ("1.000")."""

    model_config = ConfigDict(frozen=True)

    red: str
    green: str
    blue: str
    alpha: str


class ColorVariant(BaseModel):
    """One appearance of a color inside a colorset."""

    model_config = ConfigDict(frozen=True)

    components: ColorComponents
    appearances: tuple[Appearance, ...] = ()

    @property
    def is_dark(self) -> bool:
        return Appearance.DARK in self.appearances

    def to_contents(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.appearances:
            data["appearances"] = [a.to_contents() for a in self.appearances]
        data["color"] = {
            "color-space": "srgb",
            "components": self.components.model_dump(),
        }
        data["idiom"] = "universal"
        return data


class ColorCatalogEntry(BaseModel):
    """A single colorset: where it lives and what variants it holds."""

    model_config = ConfigDict(frozen=True)

    directory_path: tuple[str, ...] = ()
    leaf_name: str
    variants: tuple[ColorVariant, ...] = Field(min_length=1)

    @property
    def asset_name(self) -> str:
        return f"{self.leaf_name}{COLORSET_SUFFIX}"

    @property
    def location(self) -> tuple[str, ...]:
        """Full catalog-relative location, used as the uniqueness key."""
        return (*self.directory_path, self.leaf_name)

    @property
    def relative_dir(self) -> tuple[str, ...]:
        return (*self.directory_path, self.asset_name)

    @property
    def dark_variants(self) -> tuple[ColorVariant, ...]:
        return tuple(v for v in self.variants if v.is_dark)

    def to_contents(self) -> dict[str, Any]:
        return {
            "colors": [v.to_contents() for v in self.variants],
            "info": dict(_CATALOG_INFO),
        }


class RootMarker(BaseModel):
    """Marker file for the catalog root folder."""

    model_config = ConfigDict(frozen=True)

    def to_contents(self) -> dict[str, Any]:
        return {"info": dict(_CATALOG_INFO)}


class DirectoryMarker(BaseModel):
    """Marker file for a namespace folder inside the catalog."""

    model_config = ConfigDict(frozen=True)

    directory_path: tuple[str, ...] = Field(min_length=1)

    def to_contents(self) -> dict[str, Any]:
        return {
            "info": dict(_CATALOG_INFO),
            "properties": {"provides-namespace": True},
        }


class ColorCatalog(BaseModel):
    """Everything needed to write one color asset catalog."""

    model_config = ConfigDict(frozen=True)

    root_marker: RootMarker = Field(default_factory=RootMarker)
    entries: tuple[ColorCatalogEntry, ...] = ()
    directory_markers: tuple[DirectoryMarker, ...] = ()

    def find(self, *location: str) -> ColorCatalogEntry | None:
        """Look up an entry by its catalog-relative location ("ui", "brand")."""
        for entry in self.entries:
            if entry.location == location:
                return entry
        return None
