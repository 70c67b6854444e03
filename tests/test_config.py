from pathlib import Path

import yaml

import config


def _use_config(monkeypatch, tmp_path: Path) -> Path:
    path = tmp_path / "cfg" / ".todo_config.yaml"
    monkeypatch.setattr(config, "USER_CONFIG_PATH", path)
    return path


def _write_config(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def test_missing_config_yields_empty_values(monkeypatch, tmp_path: Path):
    _use_config(monkeypatch, tmp_path)
    assert config.get_editor() == ""
    assert config.get_theme() == ""
    assert config.get_data_dir() == ""


def test_values_are_read_from_yaml(monkeypatch, tmp_path: Path):
    path = _use_config(monkeypatch, tmp_path)
    _write_config(path, {"editor": "  vim  ", "theme": "contrast", "data_dir": "~/notes/todo"})

    assert config.get_editor() == "vim"
    assert config.get_theme() == "contrast"
    assert config.get_data_dir() == "~/notes/todo"


def test_changes_are_seen_on_the_next_read(monkeypatch, tmp_path: Path):
    path = _use_config(monkeypatch, tmp_path)
    _write_config(path, {"editor": "vim"})
    assert config.get_editor() == "vim"

    _write_config(path, {"editor": "hx"})

    assert config.get_editor() == "hx"


def test_null_and_non_string_values(monkeypatch, tmp_path: Path):
    path = _use_config(monkeypatch, tmp_path)
    _write_config(path, {"editor": None, "theme": 42})

    assert config.get_editor() == ""
    assert config.get_theme() == "42"


def test_broken_yaml_is_ignored(monkeypatch, tmp_path: Path):
    path = _use_config(monkeypatch, tmp_path)
    path.parent.mkdir(parents=True)
    path.write_text("editor: [unclosed\n", encoding="utf-8")
    assert config.get_editor() == ""

    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert config.get_editor() == ""
