import logging
from pathlib import Path

from utils.logging import get_logger, setup_logging


def test_setup_logging_writes_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "engine.log"
    root = setup_logging(log_level="debug", log_file=str(log_file))
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        get_logger("tests.logging").info("game finished")
        for handler in root.handlers:
            handler.flush()
        assert "game finished" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()


def test_setup_logging_without_file() -> None:
    root = setup_logging(log_level="WARNING", log_file="")
    try:
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
