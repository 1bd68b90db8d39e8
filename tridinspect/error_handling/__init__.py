#!/usr/bin/env python3
"""
Error taxonomy and TrID diagnostic classification for tridinspect

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .classifier import ERROR_SIGNATURES, ErrorSignature, classify_output, raise_for_output
from .errors import (
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
    error_for,
)

__all__ = [
    "ERROR_SIGNATURES",
    "ErrorCategory",
    "ErrorSignature",
    "TridError",
    "NoFileSpecifiedError",
    "InvalidMatchCountError",
    "NoDefinitionsError",
    "EmptyDefinitionsPackageError",
    "TridFileNotFoundError",
    "UnknownFileTypeError",
    "ScanTimeoutError",
    "ExecutionError",
    "classify_output",
    "error_for",
    "raise_for_output",
]
