import logging

from filecycle.logging_config import ROOT_LOGGER, get_logger, setup_logging


def test_get_logger_namespaces():
    assert get_logger("x").name == "filecycle.x"
    assert get_logger("filecycle.storage.block_io").name == "filecycle.storage.block_io"


def test_setup_logging_writes_to_stderr_only(capsys):
    logger = setup_logging(level=logging.DEBUG)
    try:
        assert logger.name == ROOT_LOGGER
        get_logger("bench").debug("hello %d", 7)
        out, err = capsys.readouterr()
        assert out == ""
        assert "filecycle.bench - DEBUG - hello 7" in err
    finally:
        logger.handlers.clear()


def test_setup_logging_replaces_handler(capsys):
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.WARNING)
    try:
        assert len(logger.handlers) == 1
        get_logger("bench").info("quiet")
        assert capsys.readouterr().err == ""
    finally:
        logger.handlers.clear()
