"""Runtime configuration model for hostfile.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_HOSTS_PATH, DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import HostfileConfigError


@dataclass(frozen=True)
class HostfileConfig:
    """Validated runtime configuration.

    Attributes:
        hosts_path: Hosts file read and written by default.
        log_level: Minimum structured log level.
    """

    hosts_path: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "HostfileConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            HostfileConfigError: If environment values are invalid.
        """
        hosts_path_value = os.getenv("HOSTFILE_PATH", str(DEFAULT_HOSTS_PATH))
        log_level_value = os.getenv("HOSTFILE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            hosts_path=Path(hosts_path_value).expanduser(),
            log_level=parse_log_level(log_level_value),
        )


def parse_log_level(raw_value: str) -> str:
    """Parse and validate a log level name.

    Args:
        raw_value: Raw level string from environment or CLI.

    Returns:
        Normalized lowercase level name.

    Raises:
        HostfileConfigError: If the level is not supported.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise HostfileConfigError(
            "Invalid HOSTFILE_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            "Set HOSTFILE_LOG_LEVEL to a supported level."
        )
    return level
