"""Mouse event handling helpers for TodoApp."""

from typing import Optional

from prompt_toolkit.mouse_events import MouseButton, MouseEvent, MouseEventType

from core import Layout
from .tui_navigation import move_vertical_selection


def _handle_scroll(app, mouse_event) -> bool:
    if mouse_event.event_type == MouseEventType.SCROLL_DOWN:
        move_vertical_selection(app, 1)
        return True
    if mouse_event.event_type == MouseEventType.SCROLL_UP:
        move_vertical_selection(app, -1)
        return True
    return False


def _handle_list_click(app, mouse_event) -> bool:
    state = app.state
    if state.layout != Layout.TASK_LIST or state.status_message:
        return False
    idx = app.scratch.index_at(mouse_event.position.y)
    if idx is None:
        return False
    if state.selected_index == idx:
        state.open_details()
    else:
        state.selected_index = idx
        state.clamp_selection()
    return True


def handle_list_mouse(app, mouse_event):
    """Route mouse events for the task list.

    Wheel events act immediately and a left click selects a row (or opens an
    already selected one). Every other event is kept for the next render pass,
    where the row under the pointer claims it.
    """
    if _handle_scroll(app, mouse_event):
        return None
    if mouse_event.event_type == MouseEventType.MOUSE_UP and mouse_event.button == MouseButton.LEFT:
        if _handle_list_click(app, mouse_event):
            app.force_render()
            return None
    app.mouse = mouse_event
    app.force_render()
    return None


def handle_details_mouse(app, mouse_event):
    """The details overlay only reacts to the wheel."""
    if _handle_scroll(app, mouse_event):
        return None
    return NotImplemented


def claim_mouse(app, line_no: int, x_start: int = 0, x_end: Optional[int] = None) -> Optional[MouseEvent]:
    """Return and consume the pending pointer event if it falls on `line_no`
    between columns `x_start` (inclusive) and `x_end` (exclusive)."""
    mouse = getattr(app, "mouse", None)
    if mouse is None or mouse.position.y != line_no:
        return None
    x = mouse.position.x
    if x < x_start or (x_end is not None and x >= x_end):
        return None
    app.mouse = None
    return mouse


__all__ = ["handle_list_mouse", "handle_details_mouse", "claim_mouse"]
