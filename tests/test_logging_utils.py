import logging

import pytest

from snapcore.logging_utils import ColorFormatter, configure_logging


@pytest.fixture
def logger_name():
    name = "snapcurve.test_logging"
    yield name
    logger = logging.getLogger(name)
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


def test_console_only(logger_name):
    assert configure_logging(name=logger_name) is None
    handlers = logging.getLogger(logger_name).handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, ColorFormatter)


def test_reconfigure_replaces_handlers(logger_name):
    configure_logging(name=logger_name)
    configure_logging(level=logging.DEBUG, name=logger_name)
    logger = logging.getLogger(logger_name)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_file_handler_writes_records(logger_name, tmp_path):
    path = configure_logging(log_dir=tmp_path / "logs", name=logger_name, run_prefix="chain")
    assert path.parent == tmp_path / "logs"
    assert path.name.startswith("chain_PID")

    logging.getLogger(logger_name).warning("fell back to a line segment")
    for h in logging.getLogger(logger_name).handlers:
        h.flush()
    text = path.read_text()
    assert "[WARNING]" in text
    assert "fell back to a line segment" in text


def test_color_formatter_includes_level_and_name():
    record = logging.LogRecord("snapcurve.solver", logging.INFO, __file__, 1,
                               "solved %s", ("ok",), None)
    out = ColorFormatter(datefmt="%H:%M:%S").format(record)
    assert "INFO" in out
    assert "snapcurve.solver: solved ok" in out
