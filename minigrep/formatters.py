"""
Formatters for search results

Render a ScanOutcome as grep-style text. Used by both CLI and MCP adapters
for consistent presentation.
"""

from typing import Any, Iterator, Optional

from rich.color import ColorSystem
from rich.style import Style

from .core.domain import ScanOutcome

PATH_STYLE = Style(color="cyan")
LINE_NUMBER_STYLE = Style(color="green")


def outcome_spans(outcome: ScanOutcome) -> Iterator[tuple[str, Optional[Style]]]:
    """Yield (text, style) pieces of the formatted outcome in output order.

    Only paths and line numbers are styled; line content is passed through
    untouched (no tab expansion, no control character stripping).
    """
    for i, result in enumerate(outcome.results):
        if i > 0:
            yield "\n", None
        yield result.path, PATH_STYLE
        for match in result.matches:
            yield "\n", None
            yield str(match.line_number), LINE_NUMBER_STYLE
            yield f": {match.content}", None


def format_outcome(outcome: ScanOutcome) -> str:
    """Format a scan outcome as one block per file.

    Example output:
        sample.txt
        2: safe, fast, productive.
        3: duct.
    """
    return "".join(text for text, _ in outcome_spans(outcome))


def render_outcome(outcome: ScanOutcome, color: bool = True) -> str:
    """Same text as format_outcome, with ANSI colors on paths and line numbers"""
    if not color:
        return format_outcome(outcome)

    return "".join(
        style.render(text, color_system=ColorSystem.STANDARD) if style else text
        for text, style in outcome_spans(outcome)
    )


def format_skipped(outcome: ScanOutcome) -> str:
    """One diagnostic line per skipped entry"""
    return "\n".join(f"skipped {entry.path}: {entry.reason}" for entry in outcome.skipped)


def format_search_result(result: dict[str, Any]) -> str:
    """Format search_files handler result as plain text.

    Example output:
        SEARCH "duct" in ./docs | 2 matches in 1 file

        docs/sample.txt
        2: safe, fast, productive.
        3: duct.
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    match_count = result["match_count"]
    file_count = result["file_count"]
    header = (
        f'SEARCH "{result["query"]}" in {result["path"]} | '
        f'{match_count} {"match" if match_count == 1 else "matches"} in '
        f'{file_count} {"file" if file_count == 1 else "files"}'
    )
    if not result["case_sensitive"]:
        header += " (ignore case)"

    lines = [header]

    if file_count == 0:
        lines.append("")
        lines.append("NO MATCHES FOUND")

    for file_result in result["results"]:
        lines.append("")
        lines.append(file_result["path"])
        for match in file_result["matches"]:
            lines.append(f"{match['line_number']}: {match['content']}")

    if result["skipped"]:
        lines.append("")
        lines.append(f"SKIPPED ({len(result['skipped'])})")
        for entry in result["skipped"]:
            lines.append(f"  {entry['path']}: {entry['reason']}")

    return "\n".join(lines)
