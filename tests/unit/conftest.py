"""Unit test configuration - isolated environment for every test"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from porterlab.backends import StemmerFactory

CONFIG_ENV_VARS = ("STEMMER_TYPE", "LOG_LEVEL", "LOG_FILE")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Start each test from defaults.

    Removes config env vars (a developer's .env must not leak in) and resets
    the stemmer factory singleton.
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    StemmerFactory._instance = None

    yield

    StemmerFactory.cleanup()


@pytest.fixture
def restore_root_logger():
    """
    setup_logging() replaces the root handlers.

    Afterwards, detach and close the console/file handlers it installed and
    put the root level back. pytest manages its own capture handlers.
    """
    root_logger = logging.getLogger()
    saved_level = root_logger.level

    yield root_logger

    for handler in list(root_logger.handlers):
        if isinstance(handler, RotatingFileHandler) or type(handler) is logging.StreamHandler:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
