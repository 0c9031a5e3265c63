"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- errors.py: Error taxonomy
- matcher.py / scanner.py: Line matching
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import CaseMode, SearchConfig, MatchRecord, FileResult, SkippedEntry, ScanOutcome
from .errors import MinigrepError, ConfigError, ScanIoError, DecodeError
from .matcher import matches
from .scanner import scan, split_lines
from .ports import FileSource
from .services import PathWalker, SearchService

__all__ = [
    # Domain models
    "CaseMode",
    "SearchConfig",
    "MatchRecord",
    "FileResult",
    "SkippedEntry",
    "ScanOutcome",
    # Errors
    "MinigrepError",
    "ConfigError",
    "ScanIoError",
    "DecodeError",
    # Matching
    "matches",
    "scan",
    "split_lines",
    # Ports
    "FileSource",
    # Services
    "PathWalker",
    "SearchService",
]
