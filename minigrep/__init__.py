"""
minigrep - literal text search over files and directory trees
"""
from .core import CaseMode, SearchConfig, ScanOutcome, FileResult, MatchRecord
from .container import Container
from .formatters import format_outcome

__version__ = "0.1.0"

__all__ = [
    "CaseMode",
    "SearchConfig",
    "ScanOutcome",
    "FileResult",
    "MatchRecord",
    "Container",
    "format_outcome",
]
