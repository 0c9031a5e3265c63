"""
Line Scanner - applies the matcher to every line of one file's contents.
"""
from .domain import CaseMode, MatchRecord
from .matcher import matches


def split_lines(contents: str) -> list[str]:
    """Split text on "\\n", dropping a trailing "\\r" from each line.

    A trailing newline does not produce an extra empty line. Only "\\n" is a
    line break here; str.splitlines() would also split on form feeds and
    Unicode separators.
    """
    lines = contents.split("\n")
    if lines[-1] == "":
        # "" or text ending in "\n"
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def scan(contents: str, query: str, mode: CaseMode = CaseMode.SENSITIVE) -> list[MatchRecord]:
    """Return a MatchRecord for each line of contents that matches query."""
    return [
        MatchRecord(line_number=i, content=line)
        for i, line in enumerate(split_lines(contents), 1)
        if matches(query, line, mode)
    ]
