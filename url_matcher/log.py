"""Logging configuration."""

import logging
import sys

FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"


def _already_configured(log: logging.Logger) -> bool:
    if not log.handlers:
        return False

    for handler in log.handlers:
        if isinstance(handler, logging.StreamHandler):
            if handler.stream == sys.stdout:
                return True

    return False


def configure_logging(debug: bool = False) -> logging.Logger:
    """Send url_matcher logs to stdout.

    Failed matches are reported at DEBUG level.

    """
    log = logging.getLogger("url_matcher")
    if debug:
        level = logging.DEBUG
    else:
        level = logging.ERROR
    log.setLevel(level)

    if _already_configured(log):
        return log

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(FORMAT_STRING)
    handler.setFormatter(formatter)
    log.propagate = False
    log.addHandler(handler)
    return log
