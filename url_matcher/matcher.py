"""Match a URL against a path pattern.

e.g.

    >>> url = "https://example.com/path/to/glory"
    >>> Matcher.match(url, "https://example.com/")  # None
    >>> Matcher.match(url, "https://example.com/path/to/glory")  # Matcher
    >>> Matcher.match(url, "/path/to/glory")  # Matcher
    >>> Matcher.match(url, "/{A}/{B}/{C}/").value_at(1)
    'to'
    >>> Matcher.match(url, "/{A}/{B}/{C}/").value_of("C")
    'glory'

"""

import logging
from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlsplit

from url_matcher.routing import (
    _compile,
    _path_segments,
    _segments_to_regex,
    _trailing_slashed,
    _url_path,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Matcher:
    """Captured values of a URL matched against a pattern."""

    url: str
    values: Mapping[str, str] = field(default_factory=dict, hash=False)
    captures: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Check url type and copy captured values."""
        if not isinstance(self.url, str):
            raise TypeError(f"url must be a string, not {type(self.url).__name__}")

        # read-only copies, nothing is shared with the caller
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "captures", tuple(self.captures))

    def __getitem__(self, key: Union[str, int]) -> Optional[str]:
        """Return value by name or by index."""
        # bool is an int subclass but never a valid index
        if isinstance(key, int) and not isinstance(key, bool):
            return self.value_at(key)
        if isinstance(key, str):
            return self.value_of(key)
        raise TypeError(f"Unsupported key type: {type(key).__name__}")

    def value_of(self, name: str) -> Optional[str]:
        """Return value captured by the placeholder `name`."""
        return self.values.get(name)

    def value_at(self, index: int) -> Optional[str]:
        """Return value captured at `index`."""
        if 0 <= index < len(self.captures):
            return self.captures[index]
        return None

    def matched(self, pattern: str) -> Optional["Matcher"]:
        """Match the stored url against another pattern."""
        return Matcher.match(self.url, pattern)

    @classmethod
    def match(cls, url: str, pattern: str) -> Optional["Matcher"]:
        """Match url against pattern.

        `pattern` is a url path pattern using `{` and `}` placeholders.
        A pattern starting with "/" matches any host, otherwise the host
        of the pattern must be the host of the url.

        Return None when the url doesn't match.

        """
        if not isinstance(url, str):
            raise TypeError(f"url must be a string, not {type(url).__name__}")
        if not isinstance(pattern, str):
            raise TypeError(
                f"pattern must be a string, not {type(pattern).__name__}"
            )

        normalized = _trailing_slashed(url)
        if normalized is None:
            return None

        try:
            parts = urlsplit(pattern)
        except ValueError as err:
            log.debug(f"Invalid pattern {pattern!r}: {err}")
            return None

        if not pattern.startswith("/"):
            host = urlsplit(normalized).hostname
            if parts.hostname != host:
                log.debug(f"Host mismatch: {parts.hostname} != {host}")
                return None

        segments = _path_segments(parts.path)
        expr = _segments_to_regex(segments)
        if expr is None:
            return None

        regex = _compile(expr)
        if regex is None:
            return None

        path = _url_path(normalized)
        result = regex.search(path)
        if not result:
            log.debug(f"No match for {pattern!r} in {path!r}")
            return None

        names = [segment.name for segment in segments if segment.is_placeholder]
        values: Dict[str, str] = {}
        captures: List[str] = []
        for index, name in enumerate(names):
            value = result.group(f"_{index}")
            if not value:
                continue
            values[name] = value
            captures.append(value)

        return cls(normalized, values, tuple(captures))


def match(url: str, pattern: str) -> Optional[Matcher]:
    """Match url against pattern, see `Matcher.match`."""
    return Matcher.match(url, pattern)
