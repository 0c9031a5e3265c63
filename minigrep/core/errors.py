"""
Errors raised by the core and the configuration layer.
"""
from typing import Optional


class MinigrepError(Exception):
    """Base class for all minigrep errors"""


class ConfigError(MinigrepError):
    """A required argument is missing or invalid"""


class ScanIoError(MinigrepError):
    """The top-level scan target cannot be opened or read"""

    def __init__(self, path: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
        self.cause = cause


class DecodeError(ScanIoError):
    """File contents are not valid UTF-8 text"""
