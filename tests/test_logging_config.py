"""Tests for the shared logging setup."""
import logging

from quickbackup.logging_config import setup_logging


def test_file_handler_uses_timestamped_format(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = setup_logging(level="INFO", log_file=str(log_file), quiet=True)

    logging.getLogger("quickbackup.pipeline").info("Created archive: x.zip")

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert "[INFO    ] [quickbackup.pipeline] Created archive: x.zip" in line
    assert "test_logging_config.py" not in line
    assert logger.name == "quickbackup"


def test_debug_adds_file_and_line(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(log_file=str(log_file), quiet=True, debug=True)

    logging.getLogger("quickbackup.archive").warning("something odd")

    assert "[test_logging_config.py:" in log_file.read_text(encoding="utf-8")


def test_console_shows_bare_messages(capsys):
    setup_logging(level="INFO")

    logging.getLogger("quickbackup.pipeline").info("Created archive: y.zip")

    assert capsys.readouterr().out == "Created archive: y.zip\n"
