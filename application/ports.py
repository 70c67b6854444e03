from pathlib import Path
from typing import List, Protocol

from core import Task


class TaskRepository(Protocol):
    def ensure_layout(self) -> None:
        ...

    def list(self) -> List[Task]:
        ...

    def complete(self, file_path: Path) -> Path:
        ...

    def next_task_path(self) -> Path:
        ...
