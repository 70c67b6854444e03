#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark": {
        "": "#d7dfe6",
        "border": "#4b525a",
        "table.header": "#ffb347 bold",
        "table.row": "",
        "table.selected": "bg:#323232 #ffffff bold",
        "table.hover": "bg:#1f2226",
        "details.title": "#ffffff bold",
        "details.tags": "#97a0a9 italic",
        "details.body": "#d7dfe6",
        "details.border": "#6d717a",
        "footer": "#6d717a",
        "status.error": "bg:#5f1f1f #ffffff bold",
    },
    "contrast": {
        "": "#e8eaec",
        "border": "#8a9097",
        "table.header": "#f0c674 bold underline",
        "table.row": "",
        "table.selected": "bg:#3d4047 #ffffff bold",
        "table.hover": "bg:#26282c",
        "details.title": "#ffffff bold",
        "details.tags": "#b8f171",
        "details.body": "#e8eaec",
        "details.border": "#a7b0ba",
        "footer": "#a7b0ba",
        "status.error": "bg:#ff6b6b #000000 bold",
    },
}

DEFAULT_THEME = "dark"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
