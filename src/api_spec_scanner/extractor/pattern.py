"""Wildcard path patterns for include/exclude filters.

``*`` matches one path segment (no ``/``); ``**`` matches any suffix,
including the empty one, across segments. Matching is full-string.
"""

import re
from functools import lru_cache

DOUBLE_STAR = "**"
STAR = "*"


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    # "**" is split out before "*" so it is never read as two single stars
    parts = []
    for i, chunk in enumerate(pattern.split(DOUBLE_STAR)):
        if i:
            parts.append(".*")
        parts.append("[^/]*".join(re.escape(literal) for literal in chunk.split(STAR)))
    return re.compile("".join(parts))


def matches(pattern: str, path: str) -> bool:
    return compile_pattern(pattern).fullmatch(path) is not None


def matches_any(patterns, path: str) -> bool:
    return any(matches(p, path) for p in patterns)
