"""
Jinja2 environment for Swift source generation.

Packaged templates live in tokenforge/templates. A project can shadow any
of them by placing a file with the same name in its templates_path; the
packaged originals stay reachable through the ``tf://`` prefix so an
override can extend or include them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PrefixLoader,
    StrictUndefined,
    TemplateError,
)

from tokenforge.core.errors import EmissionError

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def _swift_number_filter(value: Any) -> str:
    """Render a number as a Swift floating point literal (14 -> 14.0)."""
    number = round(float(value), 4)
    return repr(number)


def _swift_string_filter(value: Any) -> str:
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def create_template_env(templates_path: Path | None = None) -> Environment:
    """Create and configure the Jinja2 environment.

    Args:
        templates_path: Optional folder of project templates. When it
            exists, its templates take priority over the packaged ones.
    """
    package_loader = FileSystemLoader(str(TEMPLATES_DIR))

    if templates_path and templates_path.is_dir():
        main_loader = ChoiceLoader([FileSystemLoader(str(templates_path)), package_loader])
    else:
        main_loader = ChoiceLoader([package_loader])

    loader = ChoiceLoader(
        [PrefixLoader({"tf": package_loader}, delimiter="://"), main_loader]
    )

    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )

    env.filters["swift_number"] = _swift_number_filter
    env.filters["swift_string"] = _swift_string_filter

    return env


def render_template(env: Environment, name: str, context: dict[str, Any]) -> str:
    """Render a template, wrapping Jinja failures in EmissionError."""
    try:
        return env.get_template(name).render(**context)
    except TemplateError as e:
        raise EmissionError(f"Template rendering failed for '{name}': {e}") from e
