"""Navigation helpers for TodoApp."""

from core import Layout


def move_vertical_selection(app, delta: int) -> None:
    """
    Move the selected row by `delta`, clamping to available tasks.

    In the details layout the same movement scrolls the details block instead,
    bounded by the content measured during the last render pass.
    """
    state = app.state
    if state.layout == Layout.TASK_DETAILS:
        state.scroll_details(delta, limit=app.scratch.details_max_scroll)
    else:
        state.move_selection(delta)
    app.force_render()


__all__ = ["move_vertical_selection"]
