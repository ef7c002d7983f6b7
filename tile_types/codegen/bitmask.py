"""Combine property names into flag expressions for the generated module."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .parser import TileRecord

COMBINATOR = " | "
ZERO = "0"


def combine_flags(properties: Sequence[str]) -> str:
    """Return ``properties`` OR-ed together, in order.

    >>> combine_flags(["Burns", "Nowalk"])
    'Burns | Nowalk'
    >>> combine_flags([])
    '0'
    """
    if not properties:
        return ZERO
    return COMBINATOR.join(properties)


def assemble_bitmasks(records: Iterable[TileRecord]) -> tuple[str, ...]:
    return tuple(combine_flags(record.properties) for record in records)


__all__ = ["COMBINATOR", "ZERO", "assemble_bitmasks", "combine_flags"]
