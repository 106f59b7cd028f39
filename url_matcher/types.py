from dataclasses import dataclass
from typing import Optional

from url_matcher.patterns import placeholder_pattern


@dataclass(frozen=True)
class Segment:
    value: str
    name: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "Segment":
        """Classify a path segment as literal or placeholder."""
        match = placeholder_pattern.match(value)
        if match:
            return cls(value, match.groupdict()["name"])
        return cls(value)

    @property
    def is_placeholder(self) -> bool:
        return self.name is not None
