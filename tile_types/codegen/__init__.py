"""Import-light utilities for generating tile kind code and documentation.

Nothing here imports the generated module, so generation can run before it
exists.
"""

from __future__ import annotations

from .bitmask import assemble_bitmasks, combine_flags
from .generate import generate, main
from .model import (
    GenerationModel,
    find_duplicate_names,
    find_duplicate_symbols,
    find_invalid_identifiers,
)
from .parser import (
    TileRecord,
    capitalize_first,
    parse_tile_definitions,
    read_tile_definitions,
)
from .properties import PropertySet, collect_properties
from .render import render_readme, render_source, write_artifact

__all__ = [
    "GenerationModel",
    "PropertySet",
    "TileRecord",
    "assemble_bitmasks",
    "capitalize_first",
    "collect_properties",
    "combine_flags",
    "find_duplicate_names",
    "find_duplicate_symbols",
    "find_invalid_identifiers",
    "generate",
    "main",
    "parse_tile_definitions",
    "read_tile_definitions",
    "render_readme",
    "render_source",
    "write_artifact",
]
