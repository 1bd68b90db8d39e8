#!/usr/bin/env python3
"""Application service for scanning many files concurrently."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from ..core.scanner import TridScanner
from ..domain.results import MatchRecord
from ..error_handling import TridError
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BatchItem:
    """Outcome of one file in a batch: its matches or its error, never both."""

    file_path: str
    matches: list[MatchRecord] = field(default_factory=list)
    error: TridError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file_path,
            "matches": [match.to_dict() for match in self.matches],
            "error": self.error.to_dict() if self.error else None,
        }


def _scan_one(scanner: TridScanner, file_path: str, max_matches: int) -> BatchItem:
    try:
        return BatchItem(file_path, matches=scanner.scan(file_path, max_matches))
    except TridError as exc:
        logger.debug(f"Scan of {file_path} failed: {exc}")
        return BatchItem(file_path, error=exc)


def scan_files(
    scanner: TridScanner,
    file_paths: Sequence[str],
    max_matches: int,
    max_workers: int = 4,
) -> list[BatchItem]:
    """
    Scan every path with its own TrID process.

    Args:
        scanner: Scanner shared by all workers
        file_paths: Files to identify
        max_matches: Maximum candidates per file
        max_workers: Number of concurrent TrID processes

    Returns:
        One BatchItem per path, in input order
    """
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")
    if not file_paths:
        return []

    workers = min(max_workers, len(file_paths))
    logger.debug(f"Scanning {len(file_paths)} file(s) with {workers} worker(s)")
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_scan_one, scanner, path, max_matches) for path in file_paths]
        return [future.result() for future in futures]
