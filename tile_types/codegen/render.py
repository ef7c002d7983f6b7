"""Render the generated module and the Markdown reference from templates.

Templates live next to this module in ``templates/`` and are rendered with
``StrictUndefined`` so that a template referring to anything the model does
not provide fails instead of emitting blanks.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, PackageLoader, StrictUndefined

from ..paths import GeneratorPaths
from .bitmask import COMBINATOR, ZERO
from .model import GenerationModel

logger = logging.getLogger(__name__)

SOURCE_TEMPLATE = "tile_kinds.py.jinja"
README_TEMPLATE = "tile_kinds.md.jinja"


def _py_string(value: str) -> str:
    # JSON string escapes are a subset of Python's.
    return json.dumps(value, ensure_ascii=False)


def _qualify(expression: str, owner: str = "Property") -> str:
    """Prefix each flag in a combined expression with its enum class.

    'Burns | Nowalk' renders as 'Property.Burns | Property.Nowalk' and the
    zero sentinel as 'Property(0)'.
    """
    if expression == ZERO:
        return f"{owner}({ZERO})"
    return COMBINATOR.join(f"{owner}.{name}" for name in expression.split(COMBINATOR))


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("tile_types.codegen", "templates"),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters["py_string"] = _py_string
    env.filters["qualify"] = _qualify
    return env


def _render(template_name: str, model: GenerationModel, paths: GeneratorPaths) -> str:
    template = template_environment().get_template(template_name)
    return template.render(
        model=model,
        definitions=paths.relative(paths.definitions_path),
        source=paths.relative(paths.source_path),
        readme=paths.relative(paths.readme_path),
        grid=paths.grid_name,
    )


def render_source(model: GenerationModel, paths: GeneratorPaths) -> str:
    """Return the text of the generated Python module."""
    return _render(SOURCE_TEMPLATE, model, paths)


def render_readme(model: GenerationModel, paths: GeneratorPaths) -> str:
    """Return the Markdown reference table."""
    return _render(README_TEMPLATE, model, paths)


def write_artifact(text: str, path: Path) -> Path:
    """Replace ``path`` with ``text``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    logger.info("Wrote %s", path)
    return path


__all__ = [
    "README_TEMPLATE",
    "SOURCE_TEMPLATE",
    "render_readme",
    "render_source",
    "template_environment",
    "write_artifact",
]
