from pathlib import Path

import pytest

from infrastructure import storage_paths


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("TODO_DATA_DIR", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr(storage_paths, "get_data_dir", lambda: "")


def test_env_override_wins(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "env"))
    monkeypatch.setattr(storage_paths, "get_data_dir", lambda: str(tmp_path / "cfg"))

    assert storage_paths.get_tasks_dir() == tmp_path / "env"


def test_configured_directory_is_used(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(storage_paths, "get_data_dir", lambda: str(tmp_path / "cfg"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))

    assert storage_paths.get_tasks_dir() == tmp_path / "cfg"


def test_xdg_data_home(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    assert storage_paths.get_tasks_dir() == tmp_path / "xdg" / "todo"


def test_default_under_home(tmp_path: Path):
    assert storage_paths.get_tasks_dir() == tmp_path / "home" / ".local" / "share" / "todo"


def test_subdirectories(tmp_path: Path):
    assert storage_paths.get_completed_dir(tmp_path) == tmp_path / "completed"
    assert storage_paths.get_logs_dir(tmp_path) == tmp_path / "logs"
