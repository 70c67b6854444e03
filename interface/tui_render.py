"""Rendering helpers for TodoApp.

Every pass rebuilds the fragments from the app state. The only state touched
while rendering is the pending pointer event, which a row consumes when it is
hovered and which never outlives the pass.
"""

from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Layout, Task
from util.responsive import column_widths
from .tui_display import display_width, pad_display, trim_display, wrap_block
from .tui_mouse import claim_mouse

TABLE_HEADERS: Tuple[str, str] = ("Tasks", "Tags")
LIST_HINTS = " q quit · j/k move · l open · c complete · n new "
DETAILS_HINTS = " h back · e edit · q quit "
OVERLAY_INSET = 2

Fragments = List[Tuple[str, str]]


class RenderScratch:
    """Per-pass buffers, reused between frames and emptied when a pass starts."""

    def __init__(self):
        self.rows: List[Tuple[str, str]] = []
        # (line_no, task index) of every drawn task row.
        self.row_map: List[Tuple[int, int]] = []
        self.detail_lines: List[str] = []
        self.details_max_scroll = 0

    def reset_list(self) -> None:
        self.rows.clear()
        self.row_map.clear()

    def reset_details(self) -> None:
        self.detail_lines.clear()
        self.details_max_scroll = 0

    def index_at(self, line_no: int) -> Optional[int]:
        for row_line, idx in self.row_map:
            if row_line == line_no:
                return idx
        return None


def centered_offset(width: int, text: str) -> int:
    return max(0, width // 2 - display_width(text) // 2)


def _blank(width: int, height: int) -> FormattedText:
    return FormattedText([("", "\n".join(" " * max(0, width) for _ in range(max(0, height))))])


def render_task_list(app, width: int, height: int) -> FormattedText:
    """Bordered two-column table of every task; the footer carries key hints."""
    app.scratch.reset_list()
    try:
        if width < 4 or height < 3:
            return _blank(width, height)

        rows = app.scratch.rows
        for task in app.state.tasks:
            rows.append((task.title, task.tags))

        inner = width - 2
        result: Fragments = [("class:border", "╭" + "─" * inner + "╮\n")]
        line_counter = 1
        visible = height - 2
        widths = column_widths(inner, len(TABLE_HEADERS))

        result.append(("class:border", "│"))
        result.extend(_columns(TABLE_HEADERS, widths, "class:table.header"))
        result.append(("class:border", "│\n"))
        line_counter += 1

        active = app.state.layout == Layout.TASK_LIST
        selected = app.state.selected_index
        row_slots = visible - 1
        # Keep the selected row on screen.
        start = selected - row_slots + 1 if selected >= row_slots else 0
        drawn = 0
        for idx in range(start, min(len(rows), start + row_slots)):
            row_line = line_counter
            hovered = claim_mouse(app, row_line, 1, width - 1) is not None
            if active and idx == selected:
                style = "class:table.selected"
            elif hovered:
                style = "class:table.hover"
            else:
                style = "class:table.row"
            result.append(("class:border", "│"))
            result.extend(_columns(rows[idx], widths, style))
            result.append(("class:border", "│\n"))
            app.scratch.row_map.append((row_line, idx))
            line_counter += 1
            drawn += 1

        for _ in range(row_slots - drawn):
            result.append(("class:border", "│" + " " * inner + "│\n"))
            line_counter += 1

        hints = LIST_HINTS if active else DETAILS_HINTS
        hint_text = trim_display(hints, max(0, width - 4))
        result.append(("class:border", "╰─"))
        result.append(("class:footer", hint_text))
        result.append(("class:border", "─" * max(0, inner - 1 - display_width(hint_text)) + "╯"))
        return FormattedText(result)
    finally:
        # A pointer event lives for one pass, claimed or not.
        app.mouse = None


def _columns(values: Sequence[str], widths: Sequence[int], style: str) -> Fragments:
    return [(style, pad_display(" " + value, width)) for value, width in zip(values, widths)]


def render_task_details(app, width: int, height: int) -> FormattedText:
    """Overlay with the centered title and tags above a bordered, scrollable details box."""
    app.scratch.reset_details()
    task = app.state.active_task
    if task is None or width < 8 or height < 9:
        return _blank(width, height)

    inner = width - 2
    box_inner = width - 6
    body_height = height - 9

    result: Fragments = [("class:border", "╭" + "─" * inner + "╮\n")]
    result.extend(_overlay_line(" " * (width - 4), ""))
    result.extend(_overlay_line(_centered(task.title, width - 4), "class:details.title"))
    result.extend(_overlay_line(_centered(task.tags, width - 4), "class:details.tags"))
    result.extend(_overlay_line(" " * (width - 4), ""))

    visible = render_details_block(app, task, box_inner, body_height)
    result.extend(_overlay_box_edge("╭", "╮", box_inner))
    for line in visible:
        result.append(("class:border", "│ "))
        result.append(("class:details.border", "│"))
        result.append(("class:details.body", pad_display(line, box_inner)))
        result.append(("class:details.border", "│"))
        result.append(("class:border", " │\n"))
    result.extend(_overlay_box_edge("╰", "╯", box_inner))

    result.extend(_overlay_line(" " * (width - 4), ""))
    result.append(("class:border", "╰" + "─" * inner + "╯"))
    return FormattedText(result)


def render_details_block(app, task: Task, width: int, height: int) -> List[str]:
    """Wrap the details and return the `height` lines visible at the current scroll."""
    lines = app.scratch.detail_lines
    lines.extend(wrap_block(task.details, width))
    app.scratch.details_max_scroll = max(0, len(lines) - height)
    scroll = min(app.state.details_scroll, app.scratch.details_max_scroll)
    visible = lines[scroll:scroll + height]
    return visible + [""] * (height - len(visible))


def _centered(text: str, width: int) -> str:
    return pad_display(" " * centered_offset(width, text) + text, width)


def _overlay_line(text: str, style: str) -> Fragments:
    return [("class:border", "│ "), (style, text), ("class:border", " │\n")]


def _overlay_box_edge(left: str, right: str, box_inner: int) -> Fragments:
    return [
        ("class:border", "│ "),
        ("class:details.border", left + "─" * box_inner + right),
        ("class:border", " │\n"),
    ]


def render_status_line(app, width: int) -> FormattedText:
    message = app.state.status_message
    if not message:
        return FormattedText([])
    return FormattedText([("class:status.error", pad_display(f" ! {message}  (any key to dismiss)", width))])


__all__ = [
    "RenderScratch",
    "render_task_list",
    "render_task_details",
    "render_details_block",
    "render_status_line",
    "centered_offset",
    "TABLE_HEADERS",
    "LIST_HINTS",
    "DETAILS_HINTS",
    "OVERLAY_INSET",
]
