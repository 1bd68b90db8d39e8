#!/usr/bin/env python3
"""
tridinspect Scanner - Main TrID facade

Validates the request, runs TrID through the ProcessRunner, classifies known
diagnostics and parses the report into MatchRecord objects.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import os
from typing import TYPE_CHECKING

from ..config_schemas import ScanOptions
from ..domain.results import MatchRecord
from ..error_handling import (
    ExecutionError,
    InvalidMatchCountError,
    NoFileSpecifiedError,
    ScanTimeoutError,
    TridFileNotFoundError,
    raise_for_output,
)
from ..utils.logger import get_logger
from .constants import DEFINITIONS_FLAG_PREFIX, MATCHES_FLAG_PREFIX, VERBOSE_FLAG
from .output_parser import parse_output
from .process_runner import ProcessRunner, ProcessStatus

if TYPE_CHECKING:
    from ..config import Config

logger = get_logger(__name__)


class TridScanner:
    """
    Identify file types with TrID.

    A scanner holds only immutable options, so one instance can serve any
    number of scans, including concurrent ones.

    Example:
        >>> scanner = TridScanner(ScanOptions(timeout=10))
        >>> for match in scanner.scan("sample.pdf", 3):
        ...     print(match.probability, match.extension, match.name)
    """

    def __init__(self, options: ScanOptions | None = None, runner: ProcessRunner | None = None):
        self.options = options or ScanOptions()
        self.runner = runner or ProcessRunner()

    @classmethod
    def from_config(cls, config: "Config", runner: ProcessRunner | None = None) -> "TridScanner":
        return cls(config.scan_options(), runner=runner)

    def build_args(self, file_path: str, max_matches: int) -> list[str]:
        """Build the TrID argument list; the target path always comes last."""
        args = [VERBOSE_FLAG, f"{MATCHES_FLAG_PREFIX}{max_matches}"]
        if self.options.definitions:
            args.append(f"{DEFINITIONS_FLAG_PREFIX}{self.options.definitions}")
        args.append(file_path)
        return args

    def scan(self, file_path: str, max_matches: int) -> list[MatchRecord]:
        """
        Identify ``file_path`` and return up to ``max_matches`` candidates.

        Args:
            file_path: File to identify
            max_matches: Maximum number of candidates TrID should report

        Returns:
            Candidates in TrID's order; may be empty

        Raises:
            NoFileSpecifiedError: Empty path, or TrID reported no input file
            TridFileNotFoundError: Path does not exist, or TrID could not find it
            InvalidMatchCountError: max_matches is lower than 1
            NoDefinitionsError: TrID has no definitions to work with
            EmptyDefinitionsPackageError: The definitions package is empty
            UnknownFileTypeError: TrID could not identify the file
            ScanTimeoutError: TrID exceeded the configured timeout
            ExecutionError: TrID could not be run or failed otherwise
        """
        self._validate(file_path, max_matches)

        args = self.build_args(file_path, max_matches)
        outcome = self.runner.run(self.options.cmd, args, self.options.timeout)

        # A recognised diagnostic wins over the exit condition
        raise_for_output(outcome.output)

        if outcome.status is ProcessStatus.TIMEOUT:
            raise ScanTimeoutError(
                f"command timed out after {self.options.timeout:g}s",
                output=outcome.output,
            ) from outcome.error

        if outcome.status in (ProcessStatus.FAILED_TO_START, ProcessStatus.NONZERO_EXIT):
            raise ExecutionError(
                f"{self.options.cmd} failed: {outcome.error}",
                output=outcome.output,
            ) from outcome.error

        records = parse_output(outcome.output)
        logger.info(f"TrID reported {len(records)} match(es) for {file_path}")
        return records

    @staticmethod
    def _validate(file_path: str, max_matches: int) -> None:
        if not file_path:
            raise NoFileSpecifiedError()

        try:
            os.stat(file_path)
        except FileNotFoundError as exc:
            raise TridFileNotFoundError(f"file not found: {file_path}") from exc
        except (OSError, ValueError) as exc:
            # ValueError: embedded null byte
            raise ExecutionError(f"cannot access {file_path!r}: {exc}") from exc

        if max_matches < 1:
            raise InvalidMatchCountError()


def scan(file_path: str, max_matches: int = 1, options: ScanOptions | None = None) -> list[MatchRecord]:
    """Scan one file with a throwaway TridScanner."""
    return TridScanner(options).scan(file_path, max_matches)
