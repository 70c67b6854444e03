"""Test doubles for the external editor and the terminal-free app."""

from pathlib import Path
from types import SimpleNamespace
from typing import List

from prompt_toolkit.mouse_events import MouseButton, MouseEvent, MouseEventType
from prompt_toolkit.data_structures import Point

from core import Task
from interface.tui_render import RenderScratch


class FakeEditor:
    """Stands in for EditorHandoff: runs `action(path)` and reports back synchronously."""

    def __init__(self, action=None, returncode: int = 0, error=None):
        self.action = action
        self.returncode = returncode
        self.error = error
        self.paths: List[Path] = []

    def edit(self, path, after=None, on_error=None):
        self.paths.append(Path(path))
        if self.error is not None:
            on_error(self.error)
            return
        if self.action is not None:
            self.action(Path(path))
        if after is not None:
            after(self.returncode)


class FakeTerminal:
    """Records the suspend/resume cycle that run_in_terminal performs."""

    def __init__(self):
        self.calls: List = []

    def __call__(self, session):
        self.calls.append("suspend")
        try:
            return session()
        finally:
            self.calls.append("redraw")


def mouse(event_type=MouseEventType.MOUSE_MOVE, x: int = 5, y: int = 0, button=MouseButton.NONE) -> MouseEvent:
    return MouseEvent(position=Point(x=x, y=y), event_type=event_type, button=button, modifiers=frozenset())


def render_target(state, pointer=None):
    """Minimal stand-in for TodoApp as seen by the renderers and mouse handlers."""
    target = SimpleNamespace(state=state, mouse=pointer, scratch=RenderScratch(), renders=0)

    def force_render():
        target.renders += 1

    target.force_render = force_render
    return target


def make_tasks(count: int) -> List[Task]:
    return [Task(title=f"Task {i}", tags="", details="", file_path=f"/t/{i}.todo") for i in range(1, count + 1)]
