"""
Matcher - decides whether one line contains the query.

The query is always a literal substring, never a pattern.
"""
from .domain import CaseMode


def matches(query: str, line: str, mode: CaseMode = CaseMode.SENSITIVE) -> bool:
    """Return True if line contains query under the given case mode.

    An empty query matches every line.
    """
    if mode is CaseMode.INSENSITIVE:
        return query.lower() in line.lower()
    return query in line
