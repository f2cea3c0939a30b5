import json
from pathlib import Path

from ppath.cli import main as cli
from tests.conftest import read_tree, write_file


def test_cli_mv_merges(tmp_path: Path, make_tree):
    make_tree(tmp_path / "src", {"a.txt": "A"})
    make_tree(tmp_path / "dst", {"b.txt": "B"})

    code = cli.run(["mv", "src", "dst"], cwd=tmp_path)

    assert code == 0
    assert not (tmp_path / "src").exists()
    assert read_tree(tmp_path / "dst") == {"a.txt": "A", "b.txt": "B"}


def test_cli_mv_missing_source(tmp_path: Path, capsys):
    code = cli.run(["mv", "nope", "dst"], cwd=tmp_path)

    assert code == 1
    assert "source does not exist" in capsys.readouterr().err
    assert not (tmp_path / "dst").exists()


def test_cli_mv_uses_settings_dir_mode(tmp_path: Path):
    (tmp_path / ".ppath.json").write_text(json.dumps({"permissions": {"dir_mode": "700"}}))
    write_file(tmp_path / "a.txt", "A")

    code = cli.run(["mv", "a.txt", "new/a.txt"], cwd=tmp_path)

    assert code == 0
    assert (tmp_path / "new").stat().st_mode & 0o777 == 0o700


def test_cli_cp(tmp_path: Path):
    write_file(tmp_path / "a.txt", "A")
    (tmp_path / "out").mkdir()

    code = cli.run(["cp", "a.txt", "out"], cwd=tmp_path)

    assert code == 0
    assert (tmp_path / "out" / "a.txt").read_text() == "A"
    assert (tmp_path / "a.txt").exists()


def test_cli_info(tmp_path: Path, capsys):
    write_file(tmp_path / "a.txt", "hello")

    code = cli.run(["info", "a.txt"], cwd=tmp_path)

    out = capsys.readouterr().out
    assert code == 0
    assert "kind: file" in out
    assert "size: 5" in out
    assert "sha256: 2cf24dba" in out


def test_cli_bad_settings_env(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setenv("PPATH_SETTINGS", str(tmp_path / "missing.json"))

    code = cli.run(["info", "."], cwd=tmp_path)

    assert code == 2
    assert "PPATH_SETTINGS" in capsys.readouterr().err


def test_cli_unknown_log_level_exits_2(tmp_path: Path, capsys):
    (tmp_path / ".ppath.json").write_text(json.dumps({"logging": {"level": "LOUD"}}))
    write_file(tmp_path / "a.txt", "A")

    code = cli.run(["info", "a.txt"], cwd=tmp_path)

    assert code == 2
    assert "LOUD" in capsys.readouterr().err


def test_cli_logging_not_an_object_exits_2(tmp_path: Path, capsys):
    (tmp_path / ".ppath.json").write_text(json.dumps({"logging": "DEBUG"}))
    write_file(tmp_path / "a.txt", "A")

    code = cli.run(["mv", "a.txt", "b.txt"], cwd=tmp_path)

    assert code == 2
    assert "logging" in capsys.readouterr().err
    assert (tmp_path / "a.txt").exists()
