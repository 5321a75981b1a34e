"""Core constants used across hostfile modules.

This module centralizes paths, patterns, and exit statuses.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_HOSTS_PATH = Path("/etc/hosts")
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
FILE_ENCODING = "utf-8"
FILE_ENCODING_ERRORS = "surrogateescape"
STDIN_SOURCE = "-"
COMMENT_PREFIX = "#"
ENTRY_PATTERN = r"(\S+)[ \t]+(\S+)(\r?\n)?"
IPV4_PORT_PATTERN = r"^([0-9.]*):[0-9]+$"
IPV6_PORT_PATTERN = r"^\[(.*)\]:[0-9]+$"
KIND_LABELS = {"ipv4": "IPv4", "ipv6": "IPv6"}
EXIT_SUCCESS = 0
EXIT_SOURCE_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2
EXIT_INVALID_ARGUMENTS = 3
EXIT_INVARIANT_VIOLATION = 4
EXIT_INVALID_ADDRESS = 6
EXIT_PERMISSION_DENIED = 7
EXIT_IO_ERROR = 8
