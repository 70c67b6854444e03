"""Application state and the List/Details layout state machine."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from core import Layout, Task
from application.ports import TaskRepository


@dataclass
class AppState:
    tasks: List[Task] = field(default_factory=list)
    selected_index: int = 0
    layout: Layout = Layout.TASK_LIST
    # Detached copy of the task shown in the details layout.
    active_task: Optional[Task] = None
    status_message: str = ""
    details_scroll: int = 0

    # -- selection -----------------------------------------------------------

    def clamp_selection(self) -> None:
        total = len(self.tasks)
        if total <= 0:
            self.selected_index = 0
            return
        self.selected_index = max(0, min(self.selected_index, total - 1))

    def move_selection(self, delta: int) -> None:
        """Move the cursor by `delta`, saturating at both ends."""
        self.selected_index += delta
        self.clamp_selection()

    def selected_task(self) -> Optional[Task]:
        if not self.tasks:
            return None
        self.clamp_selection()
        return self.tasks[self.selected_index]

    # -- layout transitions --------------------------------------------------

    def open_details(self) -> bool:
        task = self.selected_task()
        if task is None:
            return False
        self.active_task = task.copy()
        self.layout = Layout.TASK_DETAILS
        self.details_scroll = 0
        return True

    def close_details(self) -> None:
        self.layout = Layout.TASK_LIST
        self.active_task = None
        self.details_scroll = 0

    def ensure_consistent(self) -> bool:
        """Fall back to the list when the details layout has nothing to show.

        Returns True when a correction was made.
        """
        if self.layout == Layout.TASK_DETAILS and self.active_task is None:
            self.close_details()
            return True
        return False

    def scroll_details(self, delta: int, limit: Optional[int] = None) -> None:
        """Scroll the details block; `limit` is the largest useful offset."""
        scroll = self.details_scroll + delta
        if limit is not None:
            scroll = min(scroll, limit)
        self.details_scroll = max(0, scroll)

    # -- task collection -----------------------------------------------------

    def clear_tasks(self) -> None:
        self.tasks = []
        self.active_task = None

    def reload(self, repository: TaskRepository) -> None:
        """Rebuild the task collection from storage.

        The active task is dropped; callers that need it re-resolve it by path.
        """
        self.clear_tasks()
        self.tasks = repository.list()
        self.clamp_selection()

    def resolve_active(self, file_path: Union[str, Path]) -> bool:
        wanted = str(file_path)
        for task in self.tasks:
            if task.file_path == wanted:
                self.active_task = task.copy()
                return True
        self.close_details()
        return False

    # -- status line ---------------------------------------------------------

    def set_status(self, message: str) -> None:
        self.status_message = message

    def dismiss_status(self) -> bool:
        if not self.status_message:
            return False
        self.status_message = ""
        return True


__all__ = ["AppState"]
