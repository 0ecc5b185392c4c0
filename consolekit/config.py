"""
Console settings for consolekit.
Read from CONSOLEKIT_* environment variables.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, asdict
from typing import Mapping, Optional

from .symbols import SymbolSet
from .theme import registry

logger = logging.getLogger(__name__)

ENV_SYMBOLS = "CONSOLEKIT_SYMBOLS"
ENV_THEME = "CONSOLEKIT_THEME"
ENV_LOG_LEVEL = "CONSOLEKIT_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConsoleSettings:
    """
    Settings used to build a Console.
    """
    symbol_set: str = SymbolSet.AUTO.value
    theme_name: str = "default"
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> ConsoleSettings:
        """Deserialize from dict, ignoring unknown keys."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered).validated()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ConsoleSettings:
        """Settings from CONSOLEKIT_* variables, defaults for anything unset."""
        env = os.environ if environ is None else environ
        data = {}
        if env.get(ENV_SYMBOLS):
            data["symbol_set"] = env[ENV_SYMBOLS].strip().lower()
        if env.get(ENV_THEME):
            data["theme_name"] = env[ENV_THEME].strip().lower()
        if env.get(ENV_LOG_LEVEL):
            data["log_level"] = env[ENV_LOG_LEVEL].strip().upper()
        return cls.from_dict(data)

    def validated(self) -> ConsoleSettings:
        """Replace invalid values with defaults (logged as warnings)."""
        defaults = ConsoleSettings()

        if self.symbol_set not in {s.value for s in SymbolSet}:
            logger.warning(f"Unknown symbol set {self.symbol_set!r}, using {defaults.symbol_set}")
            self.symbol_set = defaults.symbol_set

        if registry.get(self.theme_name) is None:
            logger.warning(f"Unknown theme {self.theme_name!r}, using {defaults.theme_name}")
            self.theme_name = defaults.theme_name

        if self.log_level not in LOG_LEVELS:
            logger.warning(f"Unknown log level {self.log_level!r}, using {defaults.log_level}")
            self.log_level = defaults.log_level

        return self

    @property
    def symbols(self) -> SymbolSet:
        return SymbolSet(self.symbol_set)
