"""Exclusion of filesystem entries by basename."""

import fnmatch
from typing import Iterable

# Always excluded, whatever the user asks for
ALWAYS_EXCLUDE = (".DS_Store",)


class ExclusionMatcher:
    """
    Decide whether an entry is left out of every measurement.

    Patterns are shell globs (``*``, ``?``, ``[...]``) matched
    case-sensitively against a single basename, never a full path.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns = list(ALWAYS_EXCLUDE)
        for pattern in patterns:
            if pattern and pattern not in self.patterns:
                self.patterns.append(pattern)

    def is_excluded(self, basename: str) -> bool:
        """Return True if basename matches any pattern."""
        return any(fnmatch.fnmatchcase(basename, p) for p in self.patterns)

    def __repr__(self) -> str:
        return f"ExclusionMatcher({self.patterns!r})"
