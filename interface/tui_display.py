"""Display utilities - text width, trimming, padding, wrapping."""

from typing import List

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    """Visual width of a single character; control characters count as zero."""
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    return sum(char_width(ch) for ch in text)


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed specified width."""
    acc = []
    used = 0
    for ch in text:
        w = char_width(ch)
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width)
    trimmed_width = display_width(trimmed)
    if trimmed_width < width:
        trimmed += " " * (width - trimmed_width)
    return trimmed


def wrap_display(text: str, width: int) -> List[str]:
    """Wrap one line of text into chunks of at most `width` columns."""
    if width <= 0:
        return []
    lines: List[str] = []
    current = ""
    used = 0
    for ch in text:
        w = char_width(ch)
        if used + w > width and current:
            lines.append(current)
            current = ch
            used = w
        else:
            current += ch
            used += w
    lines.append(current)
    return lines


def wrap_block(text: str, width: int) -> List[str]:
    """Wrap multi-line text; a trailing newline does not add an empty line."""
    if not text:
        return []
    lines: List[str] = []
    for raw in text.rstrip("\n").split("\n"):
        lines.extend(wrap_display(raw.replace("\t", "    "), width))
    return lines


__all__ = ["char_width", "display_width", "trim_display", "pad_display", "wrap_display", "wrap_block"]
