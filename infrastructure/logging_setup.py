"""Log sink for the TUI.

The terminal belongs to the UI, so logs only go to a file under the storage
directory. Failing to open it is not an error: the app simply runs unlogged.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "debug.log"


class _BestEffortFileHandler(logging.FileHandler):
    """File handler that drops records it cannot write."""

    def handleError(self, record: logging.LogRecord) -> None:
        return None


def setup_logging(log_dir: Path, level: int = logging.DEBUG) -> Optional[logging.Handler]:
    """Attach a file handler to the ``todo`` logger.

    Returns the handler so the caller can detach it on shutdown, or None when
    the log file could not be opened.
    """
    app_logger = logging.getLogger("todo")
    app_logger.setLevel(level)
    # Records must never reach a console handler while the TUI owns the screen.
    app_logger.propagate = False

    # prompt_toolkit is chatty at debug level.
    logging.getLogger("prompt_toolkit").setLevel(logging.WARNING)

    try:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handler = _BestEffortFileHandler(str(Path(log_dir) / LOG_FILE_NAME), encoding="utf-8")
    except OSError:
        return None

    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    app_logger.addHandler(handler)
    return handler


def teardown_logging(handler: Optional[logging.Handler]) -> None:
    if handler is None:
        return
    logging.getLogger("todo").removeHandler(handler)
    handler.close()


__all__ = ["setup_logging", "teardown_logging", "LOG_FILE_NAME"]
