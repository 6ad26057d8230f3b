"""Package version lookup."""

import tomllib
from importlib import metadata
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Return the installed distribution version.

    A source checkout that was never installed falls back to the
    [project] table of its pyproject.toml.
    """
    try:
        return metadata.version("tokenforge")
    except metadata.PackageNotFoundError:
        pass

    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "tokenforge" and "version" in project:
            return str(project["version"])
    return "0.0.0"
