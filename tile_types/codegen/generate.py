"""Generate the tile kinds module and its Markdown reference.

The run is a single linear pass: parse the definitions file, build the
model, then render and write the Markdown reference followed by the Python module.
Any failure aborts the run; artifacts already written are left in place.

Run with ``python -m tile_types.codegen.generate`` from the directory that
holds ``src/types.txt``, or use ``tile-types generate``.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

from jinja2 import TemplateError

from ..paths import GeneratorPaths
from .model import GenerationModel
from .parser import read_tile_definitions
from .render import render_readme, render_source, write_artifact

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TILE_TYPES_LOG_LEVEL"
TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"

# Failures that abort a run.
FATAL_ERRORS = (OSError, UnicodeDecodeError, TemplateError)


def configure_logging(level: str | None = None) -> None:  # lightweight, idempotent
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    resolved = getattr(logging, level_name, logging.WARNING)
    if not getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        logging.basicConfig(
            level=resolved,
            format="[%(levelname)s] %(name)s: %(message)s",
            stream=sys.stderr,
        )
        configure_logging._done = True  # type: ignore[attr-defined]
    logging.getLogger("tile_types").setLevel(resolved)


def current_timestamp() -> str:
    return datetime.now().astimezone().strftime(TIMESTAMP_FORMAT)


def generate(paths: GeneratorPaths, timestamp: str | None = None) -> GenerationModel:
    """Run the full pipeline and write both artifacts.

    Raises ``OSError`` when the definitions cannot be read or an output cannot
    be written, ``UnicodeDecodeError`` when the definitions are not UTF-8, and
    ``jinja2.TemplateError`` when a template fails to render.
    """
    if timestamp is None:
        timestamp = current_timestamp()
    records = read_tile_definitions(paths.definitions_path)
    logger.debug(
        "Parsed %d tile definitions from %s", len(records), paths.definitions_path
    )
    model = GenerationModel.build(records, timestamp)
    write_artifact(render_readme(model, paths), paths.readme_path)
    write_artifact(render_source(model, paths), paths.source_path)
    return model


def main() -> None:
    configure_logging()
    try:
        generate(GeneratorPaths())
    except FATAL_ERRORS as exc:
        logger.error("Tile generation failed: %s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
