#!/usr/bin/env python3
"""
tridinspect Errors

Closed error taxonomy for TrID scans. Every failure a scan can report is one
of the ErrorCategory members, raised as the matching TridError subclass.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for scan failures"""

    NO_FILE_SPECIFIED = "no_file_specified"
    INVALID_MATCH_COUNT = "invalid_match_count"
    NO_DEFINITIONS = "no_definitions"
    EMPTY_DEFINITIONS_PACKAGE = "empty_definitions_package"
    FILE_NOT_FOUND = "file_not_found"
    UNKNOWN_FILE_TYPE = "unknown_file_type"
    TIMEOUT = "timeout"
    EXECUTION_FAILURE = "execution_failure"


class TridError(Exception):
    """Base class for all scan errors."""

    category: ErrorCategory = ErrorCategory.EXECUTION_FAILURE
    default_message = "TrID scan failed"

    def __init__(self, message: str | None = None, output: str = ""):
        super().__init__(message or self.default_message)
        self.output = output

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category.value, "message": str(self)}


class NoFileSpecifiedError(TridError):
    category = ErrorCategory.NO_FILE_SPECIFIED
    default_message = "no file specified"


class InvalidMatchCountError(TridError):
    category = ErrorCategory.INVALID_MATCH_COUNT
    default_message = "number of matches must be at least 1"


class NoDefinitionsError(TridError):
    category = ErrorCategory.NO_DEFINITIONS
    default_message = "no TrID definitions available"


class EmptyDefinitionsPackageError(TridError):
    category = ErrorCategory.EMPTY_DEFINITIONS_PACKAGE
    default_message = "TrID definitions package is empty"


class TridFileNotFoundError(TridError):
    category = ErrorCategory.FILE_NOT_FOUND
    default_message = "file not found"


class UnknownFileTypeError(TridError):
    category = ErrorCategory.UNKNOWN_FILE_TYPE
    default_message = "unknown file type"


class ScanTimeoutError(TridError):
    """Raised when TrID exceeds the configured time budget."""

    category = ErrorCategory.TIMEOUT
    default_message = "command timed out"


class ExecutionError(TridError):
    """Raised when TrID could not be run or exited abnormally."""

    category = ErrorCategory.EXECUTION_FAILURE
    default_message = "TrID execution failed"


ERROR_TYPES: dict[ErrorCategory, type[TridError]] = {
    cls.category: cls
    for cls in (
        NoFileSpecifiedError,
        InvalidMatchCountError,
        NoDefinitionsError,
        EmptyDefinitionsPackageError,
        TridFileNotFoundError,
        UnknownFileTypeError,
        ScanTimeoutError,
        ExecutionError,
    )
}


def error_for(category: ErrorCategory, message: str | None = None, output: str = "") -> TridError:
    """Build the exception instance for a category."""
    return ERROR_TYPES[category](message, output=output)
