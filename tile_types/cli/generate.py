"""Generate command for tile kinds.

Provides the `generate` Click command which reads the tile definitions file
and writes the generated Python module and Markdown reference.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ..codegen.generate import FATAL_ERRORS, configure_logging, generate
from ..paths import GeneratorDefaults, GeneratorPaths

logger = logging.getLogger(__name__)

_DEFAULTS = GeneratorDefaults.load()


@click.command("generate")
@click.option(
    "--root",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Directory the default paths are relative to (default: current directory)",
)
@click.option(
    "--definitions",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Tile definitions file (default: <root>/{_DEFAULTS.definitions})",
)
@click.option(
    "--source",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Generated Python module (default: <root>/{_DEFAULTS.source})",
)
@click.option(
    "--readme",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Generated Markdown reference (default: <root>/{_DEFAULTS.readme})",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: $TILE_TYPES_LOG_LEVEL or WARNING)",
)
def generate_cmd(
    root: Path | None,
    definitions: Path | None,
    source: Path | None,
    readme: Path | None,
    log_level: str | None,
):
    """Generate the tile kinds module and Markdown reference.

    Existing outputs are replaced. Failing to read the definitions, write an
    output or render a template aborts with exit status 1.
    """
    configure_logging(log_level)
    paths = GeneratorPaths(root, definitions, source, readme)
    try:
        model = generate(paths)
    except FATAL_ERRORS as exc:
        logger.error("Tile generation failed: %s", exc)
        raise SystemExit(1) from exc
    click.echo(
        f"Generated {len(model.records)} kinds and {len(model.properties)} "
        f"properties -> {paths.relative(paths.source_path)}, "
        f"{paths.relative(paths.readme_path)}"
    )


__all__ = ["generate_cmd"]
