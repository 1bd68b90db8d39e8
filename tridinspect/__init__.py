#!/usr/bin/env python3
"""
tridinspect - Python wrapper for the TrID file identifier

Runs TrID as a subprocess and turns its text report into MatchRecord objects.

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __license__, __version__

__description__ = "Python wrapper for the TrID file identifier"

from .config_schemas import ScanOptions
from .core import ProcessRunner, TridScanner, parse_output, scan
from .domain import MatchRecord
from .error_handling import (
    EmptyDefinitionsPackageError,
    ErrorCategory,
    ExecutionError,
    InvalidMatchCountError,
    NoDefinitionsError,
    NoFileSpecifiedError,
    ScanTimeoutError,
    TridError,
    TridFileNotFoundError,
    UnknownFileTypeError,
)

__all__ = [
    "TridScanner",
    "ProcessRunner",
    "ScanOptions",
    "MatchRecord",
    "parse_output",
    "scan",
    "ErrorCategory",
    "TridError",
    "NoFileSpecifiedError",
    "InvalidMatchCountError",
    "NoDefinitionsError",
    "EmptyDefinitionsPackageError",
    "TridFileNotFoundError",
    "UnknownFileTypeError",
    "ScanTimeoutError",
    "ExecutionError",
    "__version__",
    "__author__",
    "__license__",
    "__description__",
]
