"""
Ports - Interfaces for external dependencies

These define HOW the core reaches the filesystem,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Hashable


class FileSource(ABC):
    """Port for classifying, listing and reading files"""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if path exists (False for broken symlinks)"""
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if path is a directory (following symlinks)"""
        pass

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Check if path is a regular file (following symlinks)"""
        pass

    @abstractmethod
    def list_dir(self, path: Path) -> list[Path]:
        """List direct entries of a directory in OS order, raise OSError on failure"""
        pass

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read entire file as text, raise OSError or UnicodeDecodeError on failure"""
        pass

    @abstractmethod
    def identity(self, path: Path) -> Hashable:
        """Stable identity of a directory, used to detect cycles"""
        pass
