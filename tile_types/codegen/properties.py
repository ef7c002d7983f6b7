"""Registry of distinct property names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .parser import TileRecord


class PropertySet:
    """Insertion-ordered set of property names.

    Adding a name twice is a no-op; the first-seen position is kept and
    determines the flag bit assigned to the name.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: dict[str, None] = {}
        for name in names:
            self.add(name)

    def add(self, name: str) -> None:
        self._names.setdefault(name, None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"PropertySet({list(self._names)!r})"


def collect_properties(records: Iterable[TileRecord]) -> PropertySet:
    """Return the distinct property names across ``records``."""
    registry = PropertySet()
    for record in records:
        for name in record.properties:
            registry.add(name)
    return registry


__all__ = ["PropertySet", "collect_properties"]
