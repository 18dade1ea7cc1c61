import logging

import pytest

from chaintable import config


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("chaintable")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def test_defaults():
    assert config.DEFAULT_CAPACITY == 256
    assert config.HASH_BASE == 31
    assert config.LOGGING["loggers"]["chaintable"]["level"] == config.LOG_LEVEL


def test_configure_logging_override(restore_package_logger):
    config.configure_logging("debug")
    assert restore_package_logger.level == logging.DEBUG
    assert restore_package_logger.propagate is False
    # the module-level dict is left untouched
    assert config.LOGGING["loggers"]["chaintable"]["level"] == config.LOG_LEVEL


def test_configure_logging_default_level(restore_package_logger):
    config.configure_logging()
    assert restore_package_logger.level == logging.getLevelName(config.LOG_LEVEL)
