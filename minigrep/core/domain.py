"""
Domain Models - Pure business entities

No external dependencies. These represent the core search concepts.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class CaseMode(Enum):
    """Comparison policy for a whole scan"""
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"


@dataclass(frozen=True)
class SearchConfig:
    """Everything the core needs for one invocation"""
    query: str
    target_path: str
    case_mode: CaseMode = CaseMode.SENSITIVE

    @property
    def case_sensitive(self) -> bool:
        return self.case_mode is CaseMode.SENSITIVE


@dataclass
class MatchRecord:
    """A single matching line"""
    line_number: int  # 1-based
    content: str


@dataclass
class FileResult:
    """All matches found in one file"""
    path: str
    matches: list[MatchRecord]


@dataclass
class SkippedEntry:
    """An entry that could not be scanned during recursive descent"""
    path: str
    reason: str


@dataclass
class ScanOutcome:
    """Results of one scan, in traversal order"""
    results: list[FileResult] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[FileResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def match_count(self) -> int:
        return sum(len(r.matches) for r in self.results)
