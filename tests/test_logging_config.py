import logging

from rich.logging import RichHandler

from safeargs.logging_config import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespaces_modules():
    assert get_logger("safeargs.cli").name == "safeargs.cli"
    assert get_logger(ROOT_LOGGER_NAME).name == "safeargs"
    assert get_logger("plugin").name == "safeargs.plugin"


def test_configure_logging_installs_one_rich_handler():
    logger = configure_logging("debug")
    configure_logging(logging.INFO)

    assert logger.level == logging.INFO
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
