"""
Enumeration configuration for topogen.

Provides the knobs for cycle checking, scheduling strategy selection and
logging, with support for loading from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from topogen.errors import ConfigurationError

STRATEGIES = ("scanning", "threaded")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class EnumerationConfig:
    """Enumeration settings.

    Environment Variables:
        TOPOGEN_CHECK_CYCLES: Reject cyclic graphs before preprocessing (default: true)
        TOPOGEN_DELTA_STRATEGY: Scheduler behind delta_stream (default: threaded)
        TOPOGEN_STATE_STRATEGY: Scheduler behind state_stream (default: scanning)
        TOPOGEN_LOG_LEVEL: Minimum log level (default: WARNING)
        TOPOGEN_LOG_JSON: Emit JSON log lines (default: false)

    Attributes:
        check_cycles: Raise CircularDependencyError for cyclic input instead
            of silently producing truncated orders
        delta_strategy: "threaded" or "scanning"
        state_strategy: "threaded" or "scanning"
        log_level: Name of a stdlib logging level
        log_json: JSON output instead of the console renderer
    """

    check_cycles: bool = True
    delta_strategy: str = "threaded"
    state_strategy: str = "scanning"
    log_level: str = "WARNING"
    log_json: bool = False

    def __post_init__(self) -> None:
        for name in ("delta_strategy", "state_strategy"):
            value = getattr(self, name)
            if value not in STRATEGIES:
                raise ConfigurationError(f"{name} must be one of {', '.join(STRATEGIES)}, got {value!r}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"unknown log level {self.log_level!r}")

    @property
    def log_level_number(self) -> int:
        level: int = logging.getLevelName(self.log_level)
        return level

    @classmethod
    def from_env(cls) -> EnumerationConfig:
        """Load configuration from environment variables with defaults.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        return cls(
            check_cycles=_env_bool("TOPOGEN_CHECK_CYCLES", True),
            delta_strategy=os.getenv("TOPOGEN_DELTA_STRATEGY", "threaded").strip().lower(),
            state_strategy=os.getenv("TOPOGEN_STATE_STRATEGY", "scanning").strip().lower(),
            log_level=os.getenv("TOPOGEN_LOG_LEVEL", "WARNING"),
            log_json=_env_bool("TOPOGEN_LOG_JSON", False),
        )


# Singleton for default config (loaded lazily)
_default_config: EnumerationConfig | None = None


def get_config() -> EnumerationConfig:
    """Get the default EnumerationConfig, loading from environment on first call."""
    global _default_config
    if _default_config is None:
        _default_config = EnumerationConfig.from_env()
    return _default_config


def reset_config() -> None:
    """Reset the config singleton. Useful for testing."""
    global _default_config
    _default_config = None
