"""
Configuration - turns command-line arguments and environment into a SearchConfig

This is the only place the process environment is consulted for search
settings. The core receives the finished SearchConfig.
"""
import argparse
import os
from typing import Mapping, Optional

from .core.domain import CaseMode, SearchConfig
from .core.errors import ConfigError

CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"


def case_mode_from_env(environ: Optional[Mapping[str, str]] = None) -> CaseMode:
    """CASE_INSENSITIVE set to anything (even empty) disables case-sensitive matching"""
    environ = os.environ if environ is None else environ
    if CASE_INSENSITIVE_ENV in environ:
        return CaseMode.INSENSITIVE
    return CaseMode.SENSITIVE


def config_from_args(
    args: argparse.Namespace,
    environ: Optional[Mapping[str, str]] = None
) -> SearchConfig:
    """Build a SearchConfig from parsed arguments and the environment"""
    query = getattr(args, "query", None)
    if query is None:
        raise ConfigError("Query argument not provided")

    path = getattr(args, "path", None)
    if path is None:
        raise ConfigError("Filename argument not provided")

    if getattr(args, "ignore_case", False):
        case_mode = CaseMode.INSENSITIVE
    else:
        case_mode = case_mode_from_env(environ)

    return SearchConfig(query=query, target_path=path, case_mode=case_mode)
