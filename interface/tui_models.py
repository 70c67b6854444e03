"""Controls shared by the TodoApp layout."""

from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseEvent


class InteractiveFormattedTextControl(FormattedTextControl):
    """FormattedTextControl with external mouse handler support."""

    def __init__(self, *args, mouse_handler=None, **kwargs):
        super().__init__(*args, **kwargs)
        self._external_mouse_handler = mouse_handler

    def mouse_handler(self, mouse_event: MouseEvent):
        if self._external_mouse_handler:
            result = self._external_mouse_handler(mouse_event)
            if result is not NotImplemented:
                return result
        return super().mouse_handler(mouse_event)


__all__ = ["InteractiveFormattedTextControl"]
