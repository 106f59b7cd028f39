"""Regex patterns for pattern parsing and capture groups."""

import re

# Pattern matching expressions
placeholder_pattern = re.compile(r"^\{(?P<name>.*)\}$", re.DOTALL)

# Capture group emitted for each placeholder, keyed by its position
capture_group = "(?P<_{index}>.+)"
