"""Test logging configuration."""

import logging
import sys

from url_matcher.log import FORMAT_STRING, _already_configured, configure_logging


def test_configure_logging_default(logger):
    """Should log errors to stdout."""
    log = configure_logging()
    assert log is logger
    assert log.getEffectiveLevel() == logging.ERROR
    assert not log.propagate
    assert len(log.handlers) == 1

    handler = log.handlers[0]
    assert handler.stream == sys.stdout
    assert handler.formatter._fmt == FORMAT_STRING


def test_configure_logging_debug(logger):
    """Debug sets DEBUG level."""
    log = configure_logging(debug=True)
    assert log.getEffectiveLevel() == logging.DEBUG


def test_configure_logging_twice(logger):
    """Handler is added only once."""
    configure_logging()
    log = configure_logging(debug=True)
    assert len(log.handlers) == 1
    assert log.getEffectiveLevel() == logging.DEBUG


def test_already_configured_no_handlers(other_logger):
    """Test _already_configured method when logger has no handlers."""
    assert _already_configured(other_logger) is False


def test_already_configured_with_different_stream(other_logger):
    """Test _already_configured method when handler has different stream."""
    other_logger.addHandler(logging.StreamHandler(sys.stderr))
    assert _already_configured(other_logger) is False

    other_logger.addHandler(logging.StreamHandler(sys.stdout))
    assert _already_configured(other_logger) is True
