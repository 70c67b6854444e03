"""Hand the terminal to an external editor and take it back afterwards."""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence

from prompt_toolkit.application import run_in_terminal

from core import EditorLaunchError, TodoError

logger = logging.getLogger("todo.editor")

DEFAULT_EDITOR = "nano"


def resolve_editor_command(environ: Optional[Mapping[str, str]] = None, configured: str = "") -> List[str]:
    """Editor argv: $EDITOR, then the configured editor, then nano."""
    env = os.environ if environ is None else environ
    raw = (env.get("EDITOR") or "").strip() or (configured or "").strip() or DEFAULT_EDITOR
    try:
        argv = shlex.split(raw)
    except ValueError:
        argv = [raw]
    return argv or [DEFAULT_EDITOR]


class EditorHandoff:
    """Runs the editor while the running application has released the terminal.

    `in_terminal` suspends the application (input detached, cooked mode,
    alternate screen left), calls the session and forces a full redraw once it
    returns. Without an explicit `command` the editor is looked up again on
    every handoff, so a changed $EDITOR or config file applies to the next edit.
    """

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        configured: Optional[Callable[[], str]] = None,
        runner: Callable[[List[str]], int] = subprocess.call,
        in_terminal=run_in_terminal,
    ):
        self._command = list(command) if command else None
        self._configured = configured
        self._runner = runner
        self._in_terminal = in_terminal

    def command(self) -> List[str]:
        if self._command:
            return list(self._command)
        configured = self._configured() if self._configured is not None else ""
        return resolve_editor_command(configured=configured or "")

    def run_editor(self, path: Path) -> int:
        """Run the editor on `path` and block until it exits.

        The exit status is returned but not interpreted.
        """
        command = self.command()
        argv = [*command, str(path)]
        logger.info("Launching editor: %s", argv)
        try:
            returncode = self._runner(argv)
        except OSError as exc:
            raise EditorLaunchError(f"Cannot start editor {command[0]!r}: {exc}") from exc
        logger.info("Editor exited with status %s", returncode)
        return returncode

    def edit(
        self,
        path: Path,
        after: Optional[Callable[[int], None]] = None,
        on_error: Optional[Callable[[TodoError], None]] = None,
    ):
        """Suspend the terminal, edit `path`, then call `after(returncode)`.

        `after` runs before the terminal is taken back, so the redraw that
        follows already sees its changes. Failures of either step go to
        `on_error` when one is given.
        """

        def session() -> None:
            try:
                returncode = self.run_editor(path)
                if after is not None:
                    after(returncode)
            except TodoError as exc:
                if on_error is None:
                    raise
                on_error(exc)

        return self._in_terminal(session)


__all__ = ["EditorHandoff", "resolve_editor_command", "DEFAULT_EDITOR"]
