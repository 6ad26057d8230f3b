"""
Namespace resolution for hierarchical color names.

"ui/brand/primary" maps to catalog folders ("ui", "brand") and the leaf
"primary". Each folder level needs exactly one marker file, no matter how
many colors live under it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import ErrorContext, NamespaceError

NAMESPACE_SEPARATOR = "/"

# Characters that are not safe in a folder name on macOS or Windows
_UNSAFE_CHARS = re.compile(r'[\\:*?"<>|\x00-\x1f]')


@dataclass(frozen=True)
class NamespacePath:
    """Catalog location of a single color."""

    directories: tuple[str, ...]
    leaf_name: str

    @property
    def location(self) -> tuple[str, ...]:
        return (*self.directories, self.leaf_name)


def sanitize_segment(segment: str) -> str:
    """Make a name segment safe to use as a folder name."""
    cleaned = _UNSAFE_CHARS.sub("_", segment.strip())
    # "." and ".." would escape the catalog
    if cleaned in (".", ".."):
        cleaned = cleaned.replace(".", "_")
    return cleaned


def resolve_namespace(
    name: str,
    original_name: str,
    group_using_namespace: bool,
) -> NamespacePath:
    """Resolve where a color lives inside the catalog.

    Args:
        name: Normalized color name, used as the leaf when grouping is off.
            It must then be a single segment.
        original_name: Raw hierarchical name ("ui/brand").
        group_using_namespace: Whether "/" segments become folders.

    Returns:
        NamespacePath with directory segments and the leaf name.

    Raises:
        NamespaceError: If a segment (including the leaf) is empty, or if
            an ungrouped name contains a separator.
    """
    if not group_using_namespace:
        leaf = sanitize_segment(name)
        if NAMESPACE_SEPARATOR in leaf:
            raise NamespaceError(
                "name contains a namespace separator but grouping is off",
                ErrorContext(token=name),
            )
        if not leaf:
            raise NamespaceError("name is empty", ErrorContext(token=name))
        return NamespacePath(directories=(), leaf_name=leaf)

    segments = [sanitize_segment(s) for s in original_name.split(NAMESPACE_SEPARATOR)]

    if not segments[-1]:
        raise NamespaceError(
            "name ends with an empty segment, cannot derive a leaf name",
            ErrorContext(token=original_name),
        )
    if any(not s for s in segments[:-1]):
        raise NamespaceError(
            "name contains an empty namespace segment",
            ErrorContext(token=original_name),
        )

    return NamespacePath(directories=tuple(segments[:-1]), leaf_name=segments[-1])


def directory_prefixes(directories: tuple[str, ...]) -> Iterator[tuple[str, ...]]:
    """Yield every folder level traversed by a path, outermost first.

    ("a", "b") yields ("a",) then ("a", "b").
    """
    for depth in range(1, len(directories) + 1):
        yield directories[:depth]


class DirectoryRegistry:
    """
    Collects the distinct folder levels across a set of colors.

    Membership is keyed by the full path, so the result does not depend on
    the order in which entries are registered. ``paths`` reports levels in
    first-seen order for stable output.
    """

    def __init__(self) -> None:
        self._seen: set[tuple[str, ...]] = set()
        self._ordered: list[tuple[str, ...]] = []

    def register(self, directories: tuple[str, ...]) -> list[tuple[str, ...]]:
        """Register every level of a path and return the ones not seen before."""
        added = []
        for prefix in directory_prefixes(directories):
            if prefix in self._seen:
                continue
            self._seen.add(prefix)
            self._ordered.append(prefix)
            added.append(prefix)
        return added

    def register_all(self, paths: Iterable[tuple[str, ...]]) -> None:
        for directories in paths:
            self.register(directories)

    def __contains__(self, path: object) -> bool:
        return path in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    @property
    def paths(self) -> tuple[tuple[str, ...], ...]:
        return tuple(self._ordered)
