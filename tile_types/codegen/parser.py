"""Parse the line-oriented tile definitions file.

Each non-blank line reads ``<symbol> <name> [<property>...]`` with fields
separated by single spaces. Lines with fewer than two fields are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileRecord:
    """A single tile definition."""

    symbol: str
    name: str
    properties: tuple[str, ...] = ()


def capitalize_first(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    if not text:
        return ""
    return text[:1].upper() + text[1:]


def parse_tile_definitions(text: str) -> tuple[TileRecord, ...]:
    records: list[TileRecord] = []
    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line:
            continue
        fields = line.split(" ")
        if len(fields) < 2:
            logger.debug("Skipping line %d: fewer than two fields", lineno)
            continue
        symbol, name, *props = fields
        records.append(
            TileRecord(
                symbol=symbol,
                name=capitalize_first(name),
                properties=tuple(capitalize_first(p) for p in props),
            )
        )
    return tuple(records)


def read_tile_definitions(path: str | Path) -> tuple[TileRecord, ...]:
    """Read and parse a definitions file.

    ``OSError`` propagates, as does ``UnicodeDecodeError`` for non UTF-8 input.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    return parse_tile_definitions(text)


__all__ = [
    "TileRecord",
    "capitalize_first",
    "parse_tile_definitions",
    "read_tile_definitions",
]
