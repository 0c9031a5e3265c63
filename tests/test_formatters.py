"""
Tests for result formatters
"""
from minigrep.core.domain import FileResult, MatchRecord, ScanOutcome, SkippedEntry
from minigrep.formatters import (
    LINE_NUMBER_STYLE,
    PATH_STYLE,
    format_outcome,
    format_search_result,
    format_skipped,
    outcome_spans,
    render_outcome,
)


def sample_outcome() -> ScanOutcome:
    return ScanOutcome(
        results=[
            FileResult(
                path="sample.txt",
                matches=[
                    MatchRecord(line_number=2, content="safe, fast, productive."),
                    MatchRecord(line_number=3, content="duct."),
                ],
            )
        ]
    )


class TestFormatOutcome:
    """Test format_outcome() and render_outcome()."""

    def test_plain_text(self):
        assert format_outcome(sample_outcome()) == "sample.txt\n2: safe, fast, productive.\n3: duct."

    def test_multiple_files_in_order(self):
        outcome = ScanOutcome(
            results=[
                FileResult(path="b.txt", matches=[MatchRecord(1, "x")]),
                FileResult(path="a.txt", matches=[MatchRecord(4, "y")]),
            ]
        )
        assert format_outcome(outcome) == "b.txt\n1: x\na.txt\n4: y"

    def test_empty_outcome(self):
        assert format_outcome(ScanOutcome()) == ""

    def test_styles_path_and_line_numbers(self):
        styled = {text: style for text, style in outcome_spans(sample_outcome()) if style}
        assert styled == {
            "sample.txt": PATH_STYLE,
            "2": LINE_NUMBER_STYLE,
            "3": LINE_NUMBER_STYLE,
        }

    def test_render_with_color(self):
        rendered = render_outcome(sample_outcome(), color=True)
        assert rendered.startswith("\x1b[36msample.txt\x1b[0m\n\x1b[32m2\x1b[0m: safe")
        assert rendered.endswith("\x1b[32m3\x1b[0m: duct.")

    def test_render_without_color(self):
        assert render_outcome(sample_outcome(), color=False) == format_outcome(sample_outcome())

    def test_content_is_verbatim(self):
        content = "a\tduct  \x0c[bold]x[/bold]"
        outcome = ScanOutcome(results=[FileResult(path="m.txt", matches=[MatchRecord(1, content)])])
        assert format_outcome(outcome) == f"m.txt\n1: {content}"
        assert render_outcome(outcome).endswith(f": {content}")

    def test_does_not_mutate_outcome(self):
        outcome = sample_outcome()
        render_outcome(outcome)
        assert outcome == sample_outcome()


class TestFormatSkipped:
    """Test format_skipped()."""

    def test_lines(self):
        outcome = ScanOutcome(
            skipped=[
                SkippedEntry(path="a.bin", reason="stream did not contain valid UTF-8"),
                SkippedEntry(path="loop", reason="symlink cycle"),
            ]
        )
        assert format_skipped(outcome) == (
            "skipped a.bin: stream did not contain valid UTF-8\n"
            "skipped loop: symlink cycle"
        )


class TestFormatSearchResult:
    """Test format_search_result()."""

    def test_error(self):
        assert format_search_result({"success": False, "error": "boom"}) == "ERROR: boom"

    def test_no_matches(self):
        result = {
            "success": True,
            "query": "roses",
            "path": "docs",
            "case_sensitive": True,
            "results": [],
            "file_count": 0,
            "match_count": 0,
            "skipped": [],
        }
        assert format_search_result(result) == (
            'SEARCH "roses" in docs | 0 matches in 0 files\n'
            "\n"
            "NO MATCHES FOUND"
        )

    def test_matches_and_skipped(self):
        result = {
            "success": True,
            "query": "rust",
            "path": "docs",
            "case_sensitive": False,
            "results": [
                {"path": "docs/a.txt", "matches": [{"line_number": 1, "content": "Rust:"}]},
            ],
            "file_count": 1,
            "match_count": 1,
            "skipped": [{"path": "docs/b.bin", "reason": "stream did not contain valid UTF-8"}],
        }
        assert format_search_result(result).splitlines() == [
            'SEARCH "rust" in docs | 1 match in 1 file (ignore case)',
            "",
            "docs/a.txt",
            "1: Rust:",
            "",
            "SKIPPED (1)",
            "  docs/b.bin: stream did not contain valid UTF-8",
        ]
