"""Path resolution for the tile generator.

The :class:`GeneratorPaths` value object turns a root directory plus
optional overrides into the three resolved locations the generator
touches:

Inputs
======
* ``root``: base directory (``None`` -> current working directory)
* ``definitions``, ``source``, ``readme``: file paths (``None`` -> packaged
  default from ``generator.yml``)

Outputs
=======
* ``definitions_path``: the tile definitions text file
* ``source_path``: the generated Python module
* ``readme_path``: the generated Markdown reference

Rules
=====
* Relative overrides are interpreted relative to ``root``; absolute ones are
  used as given.
* No filesystem changes are performed on construction; writers create the
  parent directories of their own targets.
"""

from __future__ import annotations

import importlib.resources as ir
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_CODEGEN_PACKAGE = "tile_types.codegen"
_DEFAULTS_FILENAME = "generator.yml"


@dataclass(frozen=True)
class GeneratorDefaults:
    """Fixed relative locations loaded from the packaged ``generator.yml``."""

    definitions: str
    source: str
    readme: str
    grid: str

    @classmethod
    def load(cls) -> GeneratorDefaults:
        defaults_path = ir.files(_CODEGEN_PACKAGE) / _DEFAULTS_FILENAME
        with defaults_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        missing = [
            key for key in ("definitions", "source", "readme") if not data.get(key)
        ]
        if missing:
            raise ValueError(
                f"{_DEFAULTS_FILENAME} is missing keys: {', '.join(missing)}"
            )
        return cls(
            definitions=str(data["definitions"]),
            source=str(data["source"]),
            readme=str(data["readme"]),
            grid=str(data.get("grid", "")),
        )


@dataclass
class GeneratorPaths:
    """Resolve the definitions input and the two generated outputs.

    Parameters
    ----------
    root : Path | str | None
        Base directory; ``None`` -> current working directory.
    definitions, source, readme : Path | str | None
        Overrides; ``None`` -> packaged default relative to ``root``.
    """

    root: Path | str | None = None
    definitions: Path | str | None = None
    source: Path | str | None = None
    readme: Path | str | None = None

    root_path: Path = field(init=False)
    definitions_path: Path = field(init=False)
    source_path: Path = field(init=False)
    readme_path: Path = field(init=False)
    defaults: GeneratorDefaults = field(init=False, repr=False)

    # ---------------------------------------------------------------------
    def __post_init__(self) -> None:
        self.defaults = GeneratorDefaults.load()
        self.root_path = self._resolve_root(self.root)
        self.definitions_path = self._resolve(
            self.definitions, self.defaults.definitions
        )
        self.source_path = self._resolve(self.source, self.defaults.source)
        self.readme_path = self._resolve(self.readme, self.defaults.readme)

    # Display helpers -----------------------------------------------------
    def relative(self, path: Path) -> str:
        """Return ``path`` relative to the root when possible (POSIX style)."""
        try:
            return path.relative_to(self.root_path).as_posix()
        except ValueError:
            return path.as_posix()

    @property
    def grid_name(self) -> str:
        return self.defaults.grid

    # Internal resolution helpers -----------------------------------------
    @staticmethod
    def _resolve_root(value: Path | str | None) -> Path:
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return Path.cwd().resolve()
        return Path(value).expanduser().resolve()

    def _resolve(self, value: Path | str | None, default: str) -> Path:
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return (self.root_path / default).resolve()
        p = Path(value).expanduser()
        if not p.is_absolute():
            p = self.root_path / p
        return p.resolve()


__all__ = ["GeneratorDefaults", "GeneratorPaths"]
