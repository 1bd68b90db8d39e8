#!/usr/bin/env python3
"""
tridinspect Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any

from .config_schemas import ScanOptions, TridInspectConfig
from .config_store import ConfigStore
from .utils.logger import get_logger

logger = get_logger(__name__)

# Environment variable -> (section, key, converter)
ENV_OVERRIDES = {
    "TRIDINSPECT_CMD": ("trid", "cmd", str),
    "TRIDINSPECT_DEFINITIONS": ("trid", "definitions", str),
    "TRIDINSPECT_TIMEOUT": ("trid", "timeout", float),
}


class Config:
    """Configuration manager for tridinspect"""

    DEFAULT_CONFIG = {
        "trid": {"cmd": "trid", "definitions": "", "timeout": 30.0},
        "scan": {"max_matches": 5, "threads": 4},
        "output": {"json_indent": 2, "csv_delimiter": ","},
    }

    def __init__(self, config_path: str | None = None, use_env: bool = True):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        if os.path.exists(self.config_path):
            self.load_config()

        if use_env:
            self._apply_env_overrides()

        # Fail early on invalid values
        TridInspectConfig.from_dict(self.config)

    @staticmethod
    def _get_default_config_path() -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".tridinspect" / "config.json")

    def load_config(self) -> None:
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config:
            self._merge_config(user_config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section not in self.config:
                logger.warning(f"Ignoring unknown config section: {section}")
                continue
            if isinstance(settings, dict):
                self.config[section].update(settings)

    def _apply_env_overrides(self) -> None:
        for env_name, (section, key, converter) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None or raw == "":
                continue
            try:
                self.config[section][key] = converter(raw)
            except ValueError:
                logger.warning(f"Ignoring invalid value for {env_name}: {raw!r}")

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def scan_options(self, **overrides: Any) -> ScanOptions:
        """Build ScanOptions from the trid section, applying non-None overrides."""
        values = dict(self.config["trid"])
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ScanOptions(**values)
