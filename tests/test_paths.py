from pathlib import Path

from tile_types.paths import GeneratorDefaults, GeneratorPaths


def test_packaged_defaults():
    defaults = GeneratorDefaults.load()
    assert defaults.definitions == "src/types.txt"
    assert defaults.source == "tile_kinds.py"
    assert defaults.readme == "tile_kinds.md"
    assert defaults.grid == "src/grid.txt"


def test_defaults_resolve_under_root(tmp_path: Path):
    paths = GeneratorPaths(tmp_path)
    root = tmp_path.resolve()
    assert paths.root_path == root
    assert paths.definitions_path == root / "src" / "types.txt"
    assert paths.source_path == root / "tile_kinds.py"
    assert paths.readme_path == root / "tile_kinds.md"


def test_root_defaults_to_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert GeneratorPaths().root_path == tmp_path.resolve()


def test_relative_overrides_are_root_relative(tmp_path: Path):
    paths = GeneratorPaths(str(tmp_path), definitions="defs/tiles.txt", source="")
    assert paths.definitions_path == tmp_path.resolve() / "defs" / "tiles.txt"
    assert paths.source_path == tmp_path.resolve() / "tile_kinds.py"


def test_absolute_override_is_kept(tmp_path: Path):
    target = tmp_path / "elsewhere" / "kinds.md"
    paths = GeneratorPaths(tmp_path / "root", readme=target)
    assert paths.readme_path == target.resolve()


def test_construction_has_no_side_effects(tmp_path: Path):
    GeneratorPaths(tmp_path / "new", source="deep/kinds.py")
    assert not (tmp_path / "new").exists()


def test_relative_display(tmp_path: Path):
    paths = GeneratorPaths(tmp_path)
    assert paths.relative(paths.definitions_path) == "src/types.txt"
    outside = (tmp_path.parent / "other.txt").resolve()
    assert paths.relative(outside) == outside.as_posix()
