#!/usr/bin/env python3
"""
TrID output error classifier

TrID has no machine-readable error channel; its diagnostics are free text
mixed into the report. This module maps the known phrases onto ErrorCategory
so the rest of the package never looks at raw diagnostic strings.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from dataclasses import dataclass

from ..utils.logger import get_logger
from .errors import ErrorCategory, error_for

logger = get_logger(__name__)


@dataclass(frozen=True)
class ErrorSignature:
    """A set of phrases that must all appear in the output."""

    category: ErrorCategory
    phrases: tuple[str, ...]

    def matches(self, output: str) -> bool:
        return all(phrase in output for phrase in self.phrases)


# Checked in order, first hit wins.
ERROR_SIGNATURES: tuple[ErrorSignature, ...] = (
    ErrorSignature(
        ErrorCategory.NO_FILE_SPECIFIED,
        ("you have to specify at least one file to analyze",),
    ),
    ErrorSignature(ErrorCategory.NO_DEFINITIONS, ("No definitions available!",)),
    ErrorSignature(ErrorCategory.EMPTY_DEFINITIONS_PACKAGE, ("Def package", "is empty!")),
    ErrorSignature(ErrorCategory.FILE_NOT_FOUND, ("Error: found no file(s) to analyze!",)),
    ErrorSignature(ErrorCategory.UNKNOWN_FILE_TYPE, ("Unknown!",)),
)


def classify_output(output: str) -> ErrorCategory | None:
    """
    Return the category of the first known diagnostic found in TrID output.

    Args:
        output: Combined stdout/stderr text captured from TrID

    Returns:
        Matching ErrorCategory, or None when the output carries no diagnostic
    """
    if not output:
        return None

    for signature in ERROR_SIGNATURES:
        if signature.matches(output):
            logger.debug(f"TrID output classified as {signature.category.value}")
            return signature.category

    return None


def raise_for_output(output: str) -> None:
    """Raise the TridError matching a diagnostic in the output, if any."""
    category = classify_output(output)
    if category is not None:
        raise error_for(category, output=output)
