"""
In-memory file descriptors produced by the exporters.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Destination:
    """Folder plus file name of an output file."""

    directory: Path
    file: str

    @property
    def path(self) -> Path:
        return self.directory / self.file


@dataclass(frozen=True)
class FileContents:
    """Bytes destined for a single output file."""

    destination: Destination
    data: bytes

    @property
    def text(self) -> str:
        return self.data.decode("utf-8")

    @classmethod
    def from_text(cls, text: str, path: Path) -> FileContents:
        return cls(Destination(directory=path.parent, file=path.name), text.encode("utf-8"))

    @classmethod
    def from_json(cls, document: dict[str, Any], directory: Path, file: str) -> FileContents:
        data = json.dumps(document, indent=2) + "\n"
        return cls(Destination(directory=directory, file=file), data.encode("utf-8"))
