from core import Layout, Task
from application.app_state import AppState
from interface.tui_navigation import move_vertical_selection
from interface.tui_render import render_task_details

from fakes import make_tasks, render_target


def test_list_movement_saturates_and_requests_a_render():
    app = render_target(AppState(tasks=make_tasks(3)))

    for delta in (1, 1, 1, -1):
        move_vertical_selection(app, delta)

    assert app.state.selected_index == 1
    assert app.renders == 4


def test_scrolling_short_details_reverses_immediately():
    task = Task(title="T", tags="", details="first\nsecond\n", file_path="/t/1.todo")
    state = AppState(tasks=[task])
    state.open_details()
    app = render_target(state)
    render_task_details(app, 56, 20)

    for _ in range(10):
        move_vertical_selection(app, 1)
    move_vertical_selection(app, -1)

    assert state.layout == Layout.TASK_DETAILS
    assert state.details_scroll == 0


def test_scrolling_long_details_stops_at_the_last_page():
    details = "".join(f"line {i}\n" for i in range(14))
    state = AppState(tasks=[Task(title="T", tags="", details=details, file_path="/t/1.todo")])
    state.open_details()
    app = render_target(state)
    render_task_details(app, 56, 20)

    for _ in range(10):
        move_vertical_selection(app, 1)
    assert state.details_scroll == 3

    move_vertical_selection(app, -1)
    assert state.details_scroll == 2
