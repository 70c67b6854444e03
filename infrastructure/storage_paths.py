from pathlib import Path
import os

from config import get_data_dir

APP_DIR_NAME = "todo"
COMPLETED_DIR_NAME = "completed"
LOGS_DIR_NAME = "logs"


def get_data_home() -> Path:
    """XDG data home, also used on macOS."""
    env_home = os.environ.get("XDG_DATA_HOME", "").strip()
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".local" / "share"


def get_tasks_dir() -> Path:
    """Resolve the task storage directory.

    Priority:
    1. TODO_DATA_DIR env variable (for tests).
    2. data_dir from the user config file.
    3. <XDG data home>/todo.
    """
    env_dir = os.environ.get("TODO_DATA_DIR", "").strip()
    if env_dir:
        return Path(env_dir).expanduser().absolute()

    configured = get_data_dir()
    if configured:
        return Path(configured).expanduser().absolute()

    return (get_data_home() / APP_DIR_NAME).absolute()


def get_completed_dir(tasks_dir: Path) -> Path:
    return tasks_dir / COMPLETED_DIR_NAME


def get_logs_dir(tasks_dir: Path) -> Path:
    return tasks_dir / LOGS_DIR_NAME


__all__ = ["get_tasks_dir", "get_data_home", "get_completed_dir", "get_logs_dir"]
