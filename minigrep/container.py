"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

from .adapters import LocalFileSource
from .core import FileSource, PathWalker, SearchService
from .core.services import DEFAULT_MAX_DEPTH


class Container:
    """Dependency injection container for the application"""

    def __init__(self, source: Optional[FileSource] = None, max_depth: int = DEFAULT_MAX_DEPTH):
        # Adapters (infrastructure)
        self.source = source if source is not None else LocalFileSource()

        # Services (use cases)
        self.walker = PathWalker(source=self.source, max_depth=max_depth)
        self.search = SearchService(walker=self.walker)
