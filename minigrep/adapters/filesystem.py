"""
Filesystem Adapter

Implements FileSource port using the local filesystem.
"""
from pathlib import Path
from typing import Hashable

from ..core.ports import FileSource


class LocalFileSource(FileSource):
    """Local filesystem access via pathlib"""

    def exists(self, path: Path) -> bool:
        """Check if path exists (False for broken symlinks)"""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if path is a directory (following symlinks)"""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if path is a regular file (following symlinks)"""
        return path.is_file()

    def list_dir(self, path: Path) -> list[Path]:
        """List direct entries in the order the OS returns them"""
        return list(path.iterdir())

    def read_text(self, path: Path) -> str:
        """Read entire file as UTF-8 text

        newline="" keeps line terminators untouched; the scanner splits lines.
        """
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def identity(self, path: Path) -> Hashable:
        """(device, inode) of the resolved path"""
        stat = path.stat()
        return (stat.st_dev, stat.st_ino)
