from __future__ import annotations

import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".todo_config.yaml"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _get_str(key: str) -> str:
    value = _load_config().get(key, "")
    return str(value).strip() if value is not None else ""


def get_editor() -> str:
    return _get_str("editor")


def get_theme() -> str:
    return _get_str("theme")


def get_data_dir() -> str:
    return _get_str("data_dir")
