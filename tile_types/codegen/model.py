"""Aggregate generation model consumed by both renderers."""

from __future__ import annotations

import keyword
import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from .bitmask import assemble_bitmasks
from .parser import TileRecord
from .properties import collect_properties

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationModel:
    timestamp: str
    records: tuple[TileRecord, ...]
    properties: tuple[str, ...]
    bitmasks: tuple[str, ...]

    @property
    def kinds(self) -> tuple[tuple[str, int], ...]:
        """Kind names with their enum values; 0 is reserved."""
        return tuple(
            (record.name, index)
            for index, record in enumerate(self.records, start=1)
        )

    @property
    def flags(self) -> tuple[tuple[str, int], ...]:
        """Property names with their flag bits; 0 is reserved."""
        return tuple((name, 1 << index) for index, name in enumerate(self.properties))

    @property
    def defaults(self) -> tuple[tuple[str, str], ...]:
        return tuple(
            (record.name, expression)
            for record, expression in zip(self.records, self.bitmasks, strict=True)
        )

    @classmethod
    def build(cls, records: Iterable[TileRecord], timestamp: str) -> GenerationModel:
        records = tuple(records)
        for symbol, count in find_duplicate_symbols(records).items():
            logger.warning(
                "Symbol %r is defined %d times; the last definition wins in "
                "SYMBOL_TO_KIND",
                symbol,
                count,
            )
        for name, count in find_duplicate_names(records).items():
            logger.warning("Kind %r is defined %d times", name, count)
        for name in find_invalid_identifiers(records):
            logger.warning(
                "%r is not a valid Python identifier; the generated module will "
                "not import",
                name,
            )
        return cls(
            timestamp=timestamp,
            records=records,
            properties=tuple(collect_properties(records)),
            bitmasks=assemble_bitmasks(records),
        )


def _duplicates(keys: Iterable[str]) -> dict[str, int]:
    counts = Counter(keys)
    return {key: count for key, count in counts.items() if count > 1}


def find_duplicate_symbols(records: Iterable[TileRecord]) -> dict[str, int]:
    """Return symbols used by more than one record, with their counts."""
    return _duplicates(record.symbol for record in records)


def find_duplicate_names(records: Iterable[TileRecord]) -> dict[str, int]:
    return _duplicates(record.name for record in records)


def find_invalid_identifiers(records: Iterable[TileRecord]) -> tuple[str, ...]:
    """Return kind and property names that cannot be enum members, once each."""
    invalid: dict[str, None] = {}
    for record in records:
        for name in (record.name, *record.properties):
            if not name.isidentifier() or keyword.iskeyword(name):
                invalid.setdefault(name, None)
    return tuple(invalid)


__all__ = [
    "GenerationModel",
    "find_duplicate_names",
    "find_duplicate_symbols",
    "find_invalid_identifiers",
]
