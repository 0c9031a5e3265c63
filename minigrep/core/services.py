"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import errno
import logging
import os
from pathlib import Path
from typing import Hashable, Iterator, Union

from .domain import CaseMode, FileResult, ScanOutcome, SearchConfig, SkippedEntry
from .errors import DecodeError, ScanIoError
from .ports import FileSource
from .scanner import scan

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64
NOT_REGULAR = "not a regular file"

# What a single visited entry produces
EntryResult = Union[FileResult, SkippedEntry]


def _describe(error: OSError) -> str:
    """Human readable reason for an OSError, without the path"""
    if error.strerror:
        return f"{error.strerror} (os error {error.errno})"
    return str(error)


class PathWalker:
    """Use case: walk a file or directory tree and scan every regular file

    Failures on the root are fatal. Failures on anything found while
    descending are recorded as SkippedEntry and the walk goes on.
    """

    def __init__(self, source: FileSource, max_depth: int = DEFAULT_MAX_DEPTH):
        self.source = source
        self.max_depth = max_depth

    def walk(
        self,
        root_path: str | Path,
        query: str,
        mode: CaseMode = CaseMode.SENSITIVE
    ) -> ScanOutcome:
        """
        Scan root_path and return matches keyed by file, in traversal order.

        Raises:
            ScanIoError: root_path does not exist or cannot be read
            DecodeError: root_path is a file that is not valid UTF-8
        """
        root = Path(root_path)
        try:
            if not self.source.exists(root):
                raise ScanIoError(
                    str(root),
                    f"{os.strerror(errno.ENOENT)} (os error {errno.ENOENT})"
                )
            root_is_dir = self.source.is_dir(root)
            if not root_is_dir and not self.source.is_file(root):
                raise ScanIoError(str(root), NOT_REGULAR)
        except OSError as e:
            raise ScanIoError(str(root), _describe(e), e) from e

        outcome = ScanOutcome()

        if not root_is_dir:
            result = self._scan_file(root, query, mode)
            if result.matches:
                outcome.results.append(result)
            return outcome

        try:
            identity = self.source.identity(root)
            entries = self.source.list_dir(root)
        except OSError as e:
            raise ScanIoError(str(root), _describe(e), e) from e

        for entry in entries:
            for item in self._visit(entry, query, mode, frozenset([identity]), 1):
                if isinstance(item, SkippedEntry):
                    logger.debug(f"skipped {item.path}: {item.reason}")
                    outcome.skipped.append(item)
                else:
                    outcome.results.append(item)

        return outcome

    def _visit(
        self,
        path: Path,
        query: str,
        mode: CaseMode,
        ancestors: frozenset[Hashable],
        depth: int
    ) -> Iterator[EntryResult]:
        """Yield one result per file found under path (depth-first, pre-order)"""
        try:
            is_dir = self.source.is_dir(path)
            is_file = not is_dir and self.source.is_file(path)
        except OSError as e:
            yield SkippedEntry(path=str(path), reason=_describe(e))
            return

        if is_dir:
            yield from self._visit_dir(path, query, mode, ancestors, depth)
            return

        # FIFOs, sockets, devices and dangling symlinks
        if not is_file:
            yield SkippedEntry(path=str(path), reason=NOT_REGULAR)
            return

        try:
            result = self._scan_file(path, query, mode)
        except ScanIoError as e:
            yield SkippedEntry(path=str(path), reason=e.message)
            return

        if result.matches:
            yield result

    def _visit_dir(
        self,
        path: Path,
        query: str,
        mode: CaseMode,
        ancestors: frozenset[Hashable],
        depth: int
    ) -> Iterator[EntryResult]:
        if depth > self.max_depth:
            yield SkippedEntry(path=str(path), reason=f"maximum depth {self.max_depth} exceeded")
            return

        try:
            identity = self.source.identity(path)
            if identity in ancestors:
                yield SkippedEntry(path=str(path), reason="symlink cycle")
                return
            entries = self.source.list_dir(path)
        except OSError as e:
            yield SkippedEntry(path=str(path), reason=_describe(e))
            return

        for entry in entries:
            yield from self._visit(entry, query, mode, ancestors | {identity}, depth + 1)

    def _scan_file(self, path: Path, query: str, mode: CaseMode) -> FileResult:
        """Read one file and scan it, raising ScanIoError on failure"""
        try:
            contents = self.source.read_text(path)
        except UnicodeDecodeError as e:
            raise DecodeError(str(path), "stream did not contain valid UTF-8", e) from e
        except OSError as e:
            raise ScanIoError(str(path), _describe(e), e) from e

        return FileResult(path=str(path), matches=scan(contents, query, mode))


class SearchService:
    """Use case: run a search described by a SearchConfig"""

    def __init__(self, walker: PathWalker):
        self.walker = walker

    def execute(self, config: SearchConfig) -> ScanOutcome:
        """
        Run one search.

        The config is the only input; nothing is read from the environment.
        """
        logger.debug(
            f"search query={config.query!r} path={config.target_path} "
            f"mode={config.case_mode.value}"
        )
        outcome = self.walker.walk(config.target_path, config.query, config.case_mode)
        logger.debug(
            f"search done: {len(outcome)} files, {outcome.match_count} matches, "
            f"{len(outcome.skipped)} skipped"
        )
        return outcome
