"""URL normalization and pattern conversion utilities."""

import logging
import re
from typing import List, Optional
from urllib.parse import urlsplit

from url_matcher.patterns import capture_group
from url_matcher.types import Segment

log = logging.getLogger(__name__)


def _trailing_slashed(url: str) -> Optional[str]:
    """Return url ending with a slash, or None if it can't be parsed."""
    if not url.endswith("/"):
        url = f"{url}/"
    try:
        urlsplit(url)
    except ValueError as err:
        log.debug(f"Invalid url {url!r}: {err}")
        return None
    return url


def _url_path(url: str) -> str:
    """Return the url path without its trailing slash.

    The root path is kept as "/".

    """
    path = urlsplit(url).path.rstrip("/")
    return path or "/"


def _path_segments(path: str) -> List[Segment]:
    # first component is the root marker
    parts = path.split("/")[1:]
    return [Segment.parse(part) for part in parts if part]


def _segments_to_regex(segments: List[Segment]) -> Optional[str]:
    tokens = []
    index = 0
    for segment in segments:
        if not segment.is_placeholder:
            # literals are not escaped
            tokens.append(segment.value)
            continue

        if not segment.name.isidentifier():
            log.debug(f"Invalid placeholder name: {segment.value}")
            return None

        tokens.append(capture_group.format(index=index))
        index += 1

    joined = "/".join(tokens)
    return f"/{joined}$"  # suffix match


def _compile(expr: str) -> Optional["re.Pattern[str]"]:
    try:
        return re.compile(expr)
    except re.error as err:
        log.debug(f"Invalid expression {expr!r}: {err}")
        return None
