import hashlib
import logging
import os
import re
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from core import StorageError, Task, TaskNumberingError
from application.ports import TaskRepository
from infrastructure.storage_paths import get_completed_dir
from infrastructure.task_file_parser import TaskFileParser

logger = logging.getLogger("todo.store")

TASK_SUFFIX = ".todo"

_NUMERIC_LOOKING = re.compile(r"^[+-]?\d")
_INTEGER = re.compile(r"[+-]?\d+")


def _integer_stem(name: str) -> Optional[int]:
    """Return the integer encoded in a file name stem, None if it is not numeric.

    Raises TaskNumberingError for stems that start like a number but are not one.
    """
    stem = Path(name).stem
    if not _NUMERIC_LOOKING.match(stem):
        return None
    if not _INTEGER.fullmatch(stem):
        raise TaskNumberingError(name)
    return int(stem)


def _sort_key(path: Path) -> Tuple[int, int, str]:
    stem = path.stem
    if _INTEGER.fullmatch(stem):
        return (0, int(stem), path.name)
    return (1, 0, path.name)


class FileTaskRepository(TaskRepository):
    def __init__(self, tasks_dir: Path, today: Callable[[], date] = date.today):
        self.tasks_dir = Path(tasks_dir).expanduser().absolute()
        self.completed_dir = get_completed_dir(self.tasks_dir)
        self._today = today

    def ensure_layout(self) -> None:
        """Create the storage directory and its completed/ subdirectory."""
        try:
            self.completed_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create task storage {self.tasks_dir}: {exc}") from exc

    def _task_files(self) -> List[Path]:
        try:
            with os.scandir(self.tasks_dir) as entries:
                # Only regular files; subdirectories and symlinks are skipped.
                files = [Path(entry.path) for entry in entries if entry.is_file(follow_symlinks=False)]
        except OSError as exc:
            raise StorageError(f"Cannot read task storage {self.tasks_dir}: {exc}") from exc
        return sorted(files, key=_sort_key)

    def list(self) -> List[Task]:
        tasks = [TaskFileParser.parse(path) for path in self._task_files()]
        logger.debug("Loaded %d tasks from %s", len(tasks), self.tasks_dir)
        return tasks

    def completed_path_for(self, file_path: Path) -> Path:
        absolute = os.path.abspath(str(file_path))
        digest = hashlib.sha256(absolute.encode("utf-8")).hexdigest()
        stamp = self._today().strftime("%Y-%m-%d")
        return self.completed_dir / f"{stamp}-{digest}{TASK_SUFFIX}"

    def complete(self, file_path: Path) -> Path:
        """Move a task file into completed/ under a content-independent name."""
        source = Path(file_path)
        target = self.completed_path_for(source)
        # Never replace an earlier completion of the same path.
        if target.exists():
            raise StorageError(f"Cannot complete task {source.name}: {target.name} already exists in completed/")
        try:
            source.rename(target)
        except OSError as exc:
            raise StorageError(f"Cannot complete task {source.name}: {exc}") from exc
        logger.info("Completed %s -> %s", source, target)
        return target

    def next_task_path(self) -> Path:
        numbers = []
        for path in self._task_files():
            number = _integer_stem(path.name)
            if number is not None:
                numbers.append(number)
        next_num = (max(numbers) + 1) if numbers else 1
        return self.tasks_dir / f"{next_num}{TASK_SUFFIX}"


__all__ = ["FileTaskRepository", "TASK_SUFFIX"]
