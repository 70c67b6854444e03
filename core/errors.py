"""Errors raised by the task store and the editor handoff."""


class TodoError(Exception):
    """Base error for failures the application knows how to report."""


class StorageError(TodoError):
    """Reading, writing or moving task files failed."""


class TaskNumberingError(TodoError):
    """A task file name looks numeric but is not an integer."""

    def __init__(self, name: str):
        super().__init__(f"Cannot number new task: file name {name!r} is not an integer")
        self.name = name


class EditorLaunchError(TodoError):
    """The external editor could not be started."""
