#!/usr/bin/env python3
"""TUI application - TodoApp class and the main entry point."""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import ConditionalContainer, Float, FloatContainer, HSplit, Window
from prompt_toolkit.layout import Layout as ScreenLayout
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseEvent

from core import Layout, TodoError
from application.app_state import AppState
from application.editor_handoff import EditorHandoff
from application.ports import TaskRepository
from infrastructure.file_repository import FileTaskRepository
from infrastructure.logging_setup import setup_logging, teardown_logging
from infrastructure.storage_paths import get_logs_dir, get_tasks_dir
from config import get_editor, get_theme

from .tui_models import InteractiveFormattedTextControl
from .tui_mouse import handle_details_mouse, handle_list_mouse
from .tui_navigation import move_vertical_selection
from .tui_render import (
    OVERLAY_INSET,
    RenderScratch,
    render_status_line,
    render_task_details,
    render_task_list,
)
from .tui_themes import DEFAULT_THEME, build_style


class TodoApp:
    def __init__(
        self,
        repository: TaskRepository,
        editor: Optional[EditorHandoff] = None,
        theme: str = DEFAULT_THEME,
        logger: Optional[logging.Logger] = None,
        input=None,
        output=None,
    ):
        self.repository = repository
        self.editor = editor if editor is not None else EditorHandoff()
        self.logger = logger if logger is not None else logging.getLogger("todo.app")
        self.state = AppState()
        self.should_quit = False
        # Pointer event waiting for the next render pass.
        self.mouse: Optional[MouseEvent] = None
        self.scratch = RenderScratch()
        self.style = build_style(theme)

        self.status_shown = Condition(lambda: bool(self.state.status_message))
        self.details_open = Condition(lambda: self.state.layout == Layout.TASK_DETAILS)
        self.in_list = ~self.status_shown & ~self.details_open
        self.in_details = ~self.status_shown & self.details_open

        self.list_control = InteractiveFormattedTextControl(
            self.get_task_list_text,
            show_cursor=False,
            focusable=False,
            mouse_handler=self._handle_list_mouse,
        )
        self.details_control = InteractiveFormattedTextControl(
            self.get_details_text,
            show_cursor=False,
            focusable=False,
            mouse_handler=self._handle_details_mouse,
        )
        status_line = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)

        body = HSplit(
            [
                Window(content=self.list_control, always_hide_cursor=True, wrap_lines=False),
                ConditionalContainer(status_line, filter=self.status_shown),
            ]
        )
        details_window = Window(content=self.details_control, always_hide_cursor=True, wrap_lines=False)
        root = FloatContainer(
            content=body,
            floats=[
                Float(
                    content=ConditionalContainer(details_window, filter=self.details_open),
                    top=OVERLAY_INSET,
                    bottom=OVERLAY_INSET,
                    left=OVERLAY_INSET,
                    right=OVERLAY_INSET,
                )
            ],
        )

        self.app = Application(
            layout=ScreenLayout(root),
            key_bindings=self._build_key_bindings(),
            style=self.style,
            full_screen=True,
            mouse_support=True,
            input=input,
            output=output,
        )
        # Keep Esc responsive; the default waits half a second for a longer sequence.
        self.app.ttimeoutlen = 0.05

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("q")
        @kb.add("c-c")
        def _(event):
            self.quit()

        @kb.add(Keys.Any, filter=self.status_shown)
        def _(event):
            """A pending error message swallows the next key."""
            self.state.dismiss_status()

        @kb.add("up", filter=self.in_list)
        @kb.add("k", filter=self.in_list)
        def _(event):
            move_vertical_selection(self, -1)

        @kb.add("down", filter=self.in_list)
        @kb.add("j", filter=self.in_list)
        def _(event):
            move_vertical_selection(self, 1)

        @kb.add(Keys.ScrollUp, filter=~self.status_shown)
        def _(event):
            move_vertical_selection(self, -1)

        @kb.add(Keys.ScrollDown, filter=~self.status_shown)
        def _(event):
            move_vertical_selection(self, 1)

        @kb.add("enter", filter=self.in_list)
        @kb.add("l", filter=self.in_list)
        def _(event):
            self.state.open_details()

        @kb.add("c", filter=self.in_list)
        def _(event):
            self._run_action(self.complete_selected_task)

        @kb.add("n", filter=self.in_list)
        def _(event):
            self._run_action(self.create_task)

        @kb.add("escape", filter=self.in_details)
        @kb.add("h", filter=self.in_details)
        def _(event):
            if not self._details_consistent():
                return
            self.state.close_details()

        @kb.add("e", filter=self.in_details)
        def _(event):
            if not self._details_consistent():
                return
            self._run_action(self.edit_active_task)

        @kb.add(Keys.Any, filter=self.in_details)
        def _(event):
            self._details_consistent()

        @kb.add(Keys.BracketedPaste)
        def _(event):
            """Pasted text is not input for any layout."""
            return

        return kb

    # -- main loop -----------------------------------------------------------

    def run(self) -> None:
        """Load tasks and process events until a quit key is pressed."""
        self.repository.ensure_layout()
        self.reload_tasks()
        self.app.run()

    def quit(self) -> None:
        self.should_quit = True
        if self.app.is_running:
            self.app.exit()

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    # -- rendering -----------------------------------------------------------

    def _screen_size(self):
        return self.app.output.get_size()

    def get_task_list_text(self) -> FormattedText:
        size = self._screen_size()
        height = size.rows - (1 if self.state.status_message else 0)
        return render_task_list(self, size.columns, height)

    def get_details_text(self) -> FormattedText:
        size = self._screen_size()
        return render_task_details(self, size.columns - 2 * OVERLAY_INSET, size.rows - 2 * OVERLAY_INSET)

    def get_status_text(self) -> FormattedText:
        return render_status_line(self, self._screen_size().columns)

    def _handle_list_mouse(self, mouse_event: MouseEvent):
        return handle_list_mouse(self, mouse_event)

    def _handle_details_mouse(self, mouse_event: MouseEvent):
        return handle_details_mouse(self, mouse_event)

    # -- actions -------------------------------------------------------------

    def _details_consistent(self) -> bool:
        if self.state.ensure_consistent():
            self.logger.warning("Details layout had no active task; returned to list")
            return False
        return True

    def _run_action(self, action: Callable[[], None]) -> None:
        try:
            action()
        except TodoError as exc:
            self._report_error(exc)

    def _report_error(self, exc: TodoError) -> None:
        self.logger.error("%s", exc)
        self.state.set_status(str(exc))
        self.force_render()

    def reload_tasks(self) -> None:
        self.state.reload(self.repository)
        self.logger.debug("Reloaded %d tasks", len(self.state.tasks))

    def complete_selected_task(self) -> None:
        task = self.state.selected_task()
        if task is None:
            return
        self.repository.complete(Path(task.file_path))
        self.reload_tasks()

    def create_task(self) -> None:
        path = self.repository.next_task_path()
        self.logger.info("Creating task %s", path)

        def after(returncode: int) -> None:
            self.state.close_details()
            self.reload_tasks()

        self.editor.edit(path, after=after, on_error=self._report_error)

    def edit_active_task(self) -> None:
        task = self.state.active_task
        if task is None:
            return
        file_path = task.file_path

        def after(returncode: int) -> None:
            self.reload_tasks()
            if not self.state.resolve_active(file_path):
                self.logger.info("Task %s is gone after editing; back to list", file_path)

        self.editor.edit(Path(file_path), after=after, on_error=self._report_error)


def main() -> int:
    tasks_dir = get_tasks_dir()
    handler = setup_logging(get_logs_dir(tasks_dir))
    logger = logging.getLogger("todo.app")
    logger.info("Starting with storage %s", tasks_dir)
    repository = FileTaskRepository(tasks_dir)
    try:
        editor = EditorHandoff(configured=get_editor)
        TodoApp(repository, editor, theme=get_theme() or DEFAULT_THEME, logger=logger).run()
    except EOFError:
        logger.error("Aborting: terminal input closed")
        print("todo: terminal input closed", file=sys.stderr)
        return 1
    except TodoError as exc:
        logger.error("Aborting: %s", exc)
        print(f"todo: {exc}", file=sys.stderr)
        return 1
    finally:
        teardown_logging(handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())
