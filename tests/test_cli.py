# tests/test_cli.py
import os

import pytest

import main as cli
from conftest import make_assignment
from config.config_loader import filter_system_args
from data import assignment_codec
from data.metadata_store import JsonFileMetadataStore


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    store_path = tmp_path / "store.json"
    monkeypatch.setenv("STREAM_METADATA_STORE", "file")
    monkeypatch.setenv("STREAM_METADATA_STORE_PATH", str(store_path))
    monkeypatch.setenv("BACKUP_ROOT", "stream_metadata")
    monkeypatch.setenv("BACKUP_INCLUDE_SECONDS", "1")
    return tmp_path, JsonFileMetadataStore(store_path)


def test_no_args_prints_usage(workspace, capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "backup_assignment" in out and "restore_assignment" in out


def test_unknown_operation(workspace, capsys):
    assert cli.main(["drop_everything"]) == 1
    assert "please use correct options" in capsys.readouterr().err


def test_restore_needs_path_and_cube(workspace, capsys):
    assert cli.main(["restore_assignment", "only-path"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_backup_assignment(workspace, capsys):
    root, store = workspace
    store.save_assignment(make_assignment("sales_cube"))
    store.save_assignment(make_assignment("web_cube"))

    assert cli.main(["backup_assignment"]) == 0
    assert "Completed backup_assignment !" in capsys.readouterr().out

    runs = list((root / "stream_metadata").iterdir())
    assert len(runs) == 1
    files = sorted(p.name for p in (runs[0] / "cubeAssignment").iterdir())
    assert files == ["sales_cube.json", "web_cube.json"]


def test_backup_with_unreadable_store(workspace):
    root, _ = workspace
    (root / "store.json").write_text("garbage", encoding="utf-8")
    assert cli.main(["backup_assignment"]) == 2
    assert not (root / "stream_metadata").exists()


def test_restore_assignment(workspace, capsys):
    root, store = workspace
    src = root / "backup" / "cubeAssignment"
    assignment_codec.dump(make_assignment("sales_cube"), src / "sales_cube.json")

    assert cli.main(["restore_assignment", str(src), "sales_cube"]) == 0
    assert "Completed restore_assignment !" in capsys.readouterr().out
    assert store.list_assignments() == [make_assignment("sales_cube")]


def test_restore_missing_file(workspace, capsys):
    root, store = workspace
    assert cli.main(["restore_assignment", str(root), "ghost_cube"]) == 2
    assert "Completed" not in capsys.readouterr().out
    assert store.list_assignments() == []


def test_system_args_override_config(workspace):
    root, store = workspace
    store.save_assignment(make_assignment("sales_cube"))
    assert cli.main(["-DBACKUP_ROOT=elsewhere", "backup_assignment"]) == 0
    assert (root / "elsewhere").is_dir()
    assert not (root / "stream_metadata").exists()


def test_filter_system_args(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "off")
    rest = filter_system_args(["-DSOME_FLAG=on", "restore_assignment", "-D", "x"])
    assert rest == ["restore_assignment", "-D", "x"]
    assert os.environ["SOME_FLAG"] == "on"
