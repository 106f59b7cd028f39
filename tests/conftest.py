import logging

import pytest


@pytest.fixture
def url():
    return "https://example.com/path/to/glory"


@pytest.fixture
def logger():
    """url_matcher logger, restored after the test."""
    log = logging.getLogger("url_matcher")
    handlers, level, propagate = log.handlers[:], log.level, log.propagate
    log.handlers = []
    log.propagate = True
    yield log
    log.handlers = handlers
    log.setLevel(level)
    log.propagate = propagate


@pytest.fixture
def other_logger():
    """Logger without handlers, restored after the test."""
    log = logging.getLogger("url_matcher_test")
    handlers = log.handlers[:]
    log.handlers = []
    yield log
    log.handlers = handlers
