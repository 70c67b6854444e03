import logging
from pathlib import Path

from infrastructure.logging_setup import LOG_FILE_NAME, setup_logging, teardown_logging


def test_records_go_to_the_log_file(tmp_path: Path):
    handler = setup_logging(tmp_path / "logs")
    try:
        assert handler is not None
        logging.getLogger("todo.app").info("hello from the app")
        logging.getLogger("todo.store").debug("store detail")
        handler.flush()
    finally:
        teardown_logging(handler)

    text = (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "INFO todo.app: hello from the app" in text
    assert "DEBUG todo.store: store detail" in text
    assert handler not in logging.getLogger("todo").handlers


def test_logs_never_propagate_to_the_console(tmp_path: Path):
    handler = setup_logging(tmp_path / "logs")
    try:
        assert logging.getLogger("todo").propagate is False
        assert logging.getLogger("prompt_toolkit").level == logging.WARNING
    finally:
        teardown_logging(handler)


def test_unwritable_log_directory_is_tolerated(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    assert setup_logging(blocker / "logs") is None
    teardown_logging(None)
