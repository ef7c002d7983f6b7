from pathlib import Path

from click.testing import CliRunner

from tile_types.cli import tile_types



def test_generate_subcommand(game_root: Path):
    runner = CliRunner()
    result = runner.invoke(tile_types, ["generate", "--root", str(game_root)])
    assert result.exit_code == 0, result.output
    assert "Generated 5 kinds and 2 properties" in result.output
    assert (game_root / "tile_kinds.py").exists()
    assert (game_root / "tile_kinds.md").exists()


def test_generate_without_options_uses_cwd(game_root: Path, monkeypatch):
    monkeypatch.chdir(game_root)
    result = CliRunner().invoke(tile_types, ["generate"])
    assert result.exit_code == 0, result.output
    assert (game_root / "tile_kinds.py").exists()


def test_generate_path_overrides(tmp_path: Path, make_definitions):
    definitions = make_definitions(tmp_path, "w water nowalk\n")
    result = CliRunner().invoke(
        tile_types,
        [
            "generate",
            "--root",
            str(tmp_path),
            "--definitions",
            str(definitions),
            "--source",
            "game/kinds.py",
            "--readme",
            "docs/kinds.md",
            "--log-level",
            "info",
        ],
    )
    assert result.exit_code == 0, result.output
    assert (tmp_path / "game" / "kinds.py").exists()
    assert (tmp_path / "docs" / "kinds.md").exists()


def test_generate_missing_definitions_exits_nonzero(tmp_path: Path):
    result = CliRunner().invoke(tile_types, ["generate", "--root", str(tmp_path)])
    assert result.exit_code == 1
    assert not (tmp_path / "tile_kinds.md").exists()


def test_generate_undecodable_definitions_exits_nonzero(tmp_path: Path, caplog):
    definitions = tmp_path / "src" / "types.txt"
    definitions.parent.mkdir()
    definitions.write_bytes(b"\xe9 grass burns\n")
    result = CliRunner().invoke(tile_types, ["generate", "--root", str(tmp_path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert any("Tile generation failed" in r.getMessage() for r in caplog.records)
    assert not (tmp_path / "tile_kinds.md").exists()
