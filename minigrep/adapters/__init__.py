"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: Local filesystem file source
"""
from .filesystem import LocalFileSource

__all__ = [
    "LocalFileSource",
]
