#!/usr/bin/env python3
"""
tridinspect Configuration Schemas

Frozen dataclasses describing every configuration section.
"""

from .schemas import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TRID_COMMAND,
    OutputConfig,
    ScanDefaultsConfig,
    ScanOptions,
    TridInspectConfig,
)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_TRID_COMMAND",
    "TridInspectConfig",
    "ScanOptions",
    "ScanDefaultsConfig",
    "OutputConfig",
]
