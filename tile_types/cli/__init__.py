"""CLI command group for the tile generator.

This module exposes the root Click command group `tile_types` which
aggregates subcommands implemented in sibling modules.

Example usage:

        tile-types generate
        tile-types generate --root path/to/game --log-level INFO
"""

from __future__ import annotations

import click

from .generate import generate_cmd


@click.group()
def tile_types():  # pragma: no cover - thin group wrapper
    """Tile kind code generation commands."""


# Register subcommands
tile_types.add_command(generate_cmd)

__all__ = ["tile_types"]
