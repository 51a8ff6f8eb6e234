import logging
from pathlib import Path

import pytest

from got_tracker.config import Config
from got_tracker.logger import get_logger, setup_logger, timestamped_log_file

TEST_LOGGER = "got_tracker_test"


@pytest.fixture
def logger_name():
    """Eigener Logger-Name, damit der Paket-Logger unberührt bleibt."""
    yield TEST_LOGGER
    logger = logging.getLogger(TEST_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _config(tmp_path, level="INFO", file=""):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"logging:\n  level: {level}\n  file: '{file}'\n", encoding="utf-8")
    return Config(config_file)


def test_get_logger_has_no_file_handler(logger_name, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    logger = get_logger(logger_name)

    assert logger.handlers
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    assert not (tmp_path / "logs").exists()


def test_get_logger_does_not_add_duplicate_handlers(logger_name):
    get_logger(logger_name)
    assert len(get_logger(logger_name).handlers) == 1


def test_setup_logger_uses_config(logger_name, tmp_path):
    config = _config(tmp_path, level="DEBUG", file=str(tmp_path / "out" / "trace.log"))
    logger = setup_logger(config, name=logger_name)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert logger.level == logging.DEBUG
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.DEBUG
    assert Path(file_handlers[0].baseFilename).parent == tmp_path / "out"


def test_setup_logger_replaces_handlers(logger_name, tmp_path):
    setup_logger(_config(tmp_path, file=str(tmp_path / "first.log")), name=logger_name)
    logger = setup_logger(_config(tmp_path, level="WARNING", file=str(tmp_path / "second.log")), name=logger_name)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(logger.handlers) == 2
    assert len(file_handlers) == 1
    assert Path(file_handlers[0].baseFilename).name.startswith("second_")
    assert file_handlers[0].level == logging.WARNING


def test_setup_logger_empty_file_disables_file_logging(logger_name, tmp_path):
    logger = setup_logger(_config(tmp_path), name=logger_name, console_output=False)
    assert logger.handlers == []


def test_timestamped_log_file():
    path = timestamped_log_file(Path("logs/app.log"))
    assert path.parent == Path("logs")
    assert path.name.startswith("app_")
    assert path.suffix == ".log"
