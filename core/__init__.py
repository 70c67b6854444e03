from .task import Task
from .layout import Layout
from .errors import TodoError, StorageError, TaskNumberingError, EditorLaunchError

__all__ = [
    "Task",
    "Layout",
    # Errors
    "TodoError",
    "StorageError",
    "TaskNumberingError",
    "EditorLaunchError",
]
