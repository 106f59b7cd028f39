"""url_matcher: match URLs against path patterns."""

from url_matcher.log import configure_logging
from url_matcher.matcher import Matcher, match
from url_matcher.types import Segment

__all__ = ["Matcher", "Segment", "configure_logging", "match"]
