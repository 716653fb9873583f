import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pymeshdecimator
from pymeshdecimator import Settings, configure_logging
from pymeshdecimator.settings import PackageStreamHandler
from pymeshdecimator.utils import to_single


@pytest.fixture
def package_logger():
    logger = logging.getLogger(Settings.LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_epsilon_is_single_precision():
    assert Settings.EPSILON == pytest.approx(1e-10, rel=1e-6)
    assert to_single(Settings.EPSILON) == Settings.EPSILON
    assert pymeshdecimator.EPSILON == Settings.EPSILON
    assert pymeshdecimator.Vector3.EPSILON == Settings.EPSILON


def test_configure_logging_sets_level(package_logger):
    logger = configure_logging(logging.DEBUG)
    assert logger is package_logger
    assert logger.level == logging.DEBUG

    configure_logging()
    assert logger.level == Settings.LOG_LEVEL


def test_configure_logging_adds_one_handler(package_logger):
    before = len(package_logger.handlers)
    configure_logging(logging.INFO)
    configure_logging(logging.INFO)
    assert len(package_logger.handlers) == before + 1
    assert isinstance(package_logger.handlers[-1], PackageStreamHandler)
    assert sum(isinstance(h, PackageStreamHandler) for h in package_logger.handlers) == 1


def test_version():
    assert pymeshdecimator.__version__ == "0.1.0"


def test_configure_logging_ignores_unrelated_handlers(package_logger):
    other = logging.StreamHandler()
    package_logger.addHandler(other)
    configure_logging()
    assert other in package_logger.handlers
    assert any(isinstance(h, PackageStreamHandler) for h in package_logger.handlers)
