#!/usr/bin/env python3
"""
tridinspect Core Package - TrID execution and report parsing

This package provides the core components:
- TridScanner: Main scanning facade
- ProcessRunner: Bounded subprocess execution
- parse_output: TrID report parser

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .output_parser import parse_block, parse_output
from .process_runner import ProcessOutcome, ProcessRunner, ProcessStatus
from .scanner import TridScanner, scan

__all__ = [
    "TridScanner",
    "ProcessRunner",
    "ProcessOutcome",
    "ProcessStatus",
    "parse_block",
    "parse_output",
    "scan",
]
