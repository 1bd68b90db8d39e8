#!/usr/bin/env python3
"""
tridinspect Configuration Schemas - Typed Dataclasses
Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

DEFAULT_TRID_COMMAND = "trid"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class ScanOptions:
    """
    TrID execution settings, shared by every scan of a scanner.

    Attributes:
        cmd: Executable name or path, resolved through PATH when not absolute
        definitions: Path to an alternate definitions package (empty = built-in)
        timeout: Wall-clock budget for one TrID run, in seconds
    """

    cmd: str = DEFAULT_TRID_COMMAND
    definitions: str = ""
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        """Apply defaults for unset values and validate the rest"""
        if not self.cmd:
            object.__setattr__(self, "cmd", DEFAULT_TRID_COMMAND)
        if self.definitions is None:
            object.__setattr__(self, "definitions", "")
        if not self.timeout:
            object.__setattr__(self, "timeout", DEFAULT_TIMEOUT_SECONDS)
        if self.timeout < 0:
            raise ValueError("timeout must be positive")
        object.__setattr__(self, "timeout", float(self.timeout))


@dataclass(frozen=True)
class ScanDefaultsConfig:
    """Defaults for scans started from the command line"""

    max_matches: int = 5
    threads: int = 4

    def __post_init__(self):
        """Validate configuration values"""
        if self.max_matches < 1:
            raise ValueError("max_matches must be at least 1")
        if self.threads < 1:
            raise ValueError("threads must be at least 1")


@dataclass(frozen=True)
class OutputConfig:
    """Output formatting configuration"""

    json_indent: int = 2
    csv_delimiter: str = ","

    def __post_init__(self):
        """Validate configuration values"""
        if self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")
        if len(self.csv_delimiter) != 1:
            raise ValueError("csv_delimiter must be a single character")


@dataclass(frozen=True)
class TridInspectConfig:
    """Main tridinspect configuration container"""

    trid: ScanOptions = field(default_factory=ScanOptions)
    scan: ScanDefaultsConfig = field(default_factory=ScanDefaultsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "TridInspectConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "trid" in config_dict:
            kwargs["trid"] = ScanOptions(**config_dict["trid"])

        if "scan" in config_dict:
            kwargs["scan"] = ScanDefaultsConfig(**config_dict["scan"])

        if "output" in config_dict:
            kwargs["output"] = OutputConfig(**config_dict["output"])

        return cls(**kwargs)
