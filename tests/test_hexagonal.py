"""
Minimal tests for hexagonal architecture

Basic smoke tests to verify the architecture works.
"""
import asyncio
from pathlib import Path
from unittest.mock import Mock

from minigrep.core.domain import CaseMode, SearchConfig, ScanOutcome, FileResult, MatchRecord, SkippedEntry
from minigrep.core.ports import FileSource
from minigrep.container import Container


class TestDomainModels:
    """Test domain models are simple dataclasses."""

    def test_search_config_defaults_to_case_sensitive(self):
        config = SearchConfig(query="duct", target_path="poem.txt")
        assert config.case_mode is CaseMode.SENSITIVE
        assert config.case_sensitive is True

    def test_search_config_insensitive(self):
        config = SearchConfig(query="duct", target_path="poem.txt", case_mode=CaseMode.INSENSITIVE)
        assert config.case_sensitive is False

    def test_scan_outcome_iterates_results(self):
        outcome = ScanOutcome(
            results=[
                FileResult(path="a.txt", matches=[MatchRecord(1, "x"), MatchRecord(3, "x")]),
                FileResult(path="b.txt", matches=[MatchRecord(2, "x")]),
            ],
            skipped=[SkippedEntry(path="c.bin", reason="stream did not contain valid UTF-8")],
        )
        assert [r.path for r in outcome] == ["a.txt", "b.txt"]
        assert len(outcome) == 2
        assert outcome.match_count == 3


class TestContainer:
    """Test dependency injection container."""

    def test_container_creates_all_services(self):
        container = Container()

        assert container.source is not None
        assert container.walker.source is container.source
        assert container.search.walker is container.walker

    def test_container_accepts_custom_source(self):
        source = Mock(spec=FileSource)
        source.exists.return_value = True
        source.is_dir.return_value = False
        source.is_file.return_value = True
        source.read_text.return_value = "alpha\nbeta\n"

        container = Container(source=source)
        outcome = container.search.execute(SearchConfig(query="bet", target_path="virtual.txt"))

        assert outcome.results == [FileResult(path="virtual.txt", matches=[MatchRecord(2, "beta")])]
        source.read_text.assert_called_once_with(Path("virtual.txt"))


class TestMCPHandlers:
    """Test MCP handlers use the container."""

    def test_handlers_initialization(self):
        from minigrep.adapters.mcp.handlers import MCPHandlers

        container = Container()
        handlers = MCPHandlers(container)

        assert handlers.container is container

    def test_search_files(self, tmp_path):
        from minigrep.adapters.mcp.handlers import MCPHandlers

        path = tmp_path / "poem.txt"
        path.write_text("Rust:\nTrust me.\n")
        handlers = MCPHandlers(Container())

        result = asyncio.run(handlers.search_files("rust", str(path), case_insensitive=True))

        assert result["success"] is True
        assert result["case_sensitive"] is False
        assert result["file_count"] == 1
        assert result["match_count"] == 2
        assert result["results"][0]["matches"] == [
            {"line_number": 1, "content": "Rust:"},
            {"line_number": 2, "content": "Trust me."},
        ]
        assert result["skipped"] == []

    def test_search_files_missing_path(self, tmp_path):
        from minigrep.adapters.mcp.handlers import MCPHandlers

        handlers = MCPHandlers(Container())

        result = asyncio.run(handlers.search_files("x", str(tmp_path / "missing")))

        assert result["success"] is False
        assert "No such file or directory" in result["error"]
