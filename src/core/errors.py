"""Hostfile exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure kind maps onto one stable CLI exit status.
"""

from __future__ import annotations

import errno

_PERMISSION_ERRNOS = frozenset({errno.EACCES, errno.EPERM, errno.EROFS})


class HostfileError(Exception):
    """Base exception for all hostfile failures."""


class HostfileConfigError(HostfileError):
    """Raised for invalid runtime configuration."""


class HostfileSourceNotFoundError(HostfileError):
    """Raised when a hosts file or its directory does not exist."""


class HostfilePermissionError(HostfileError):
    """Raised when a hosts file cannot be opened with current privileges."""


class HostfileAddressError(HostfileError):
    """Raised when text is neither an IPv4 nor an IPv6 literal.

    Attributes:
        address: The offending address text, kept for diagnostics.
    """

    def __init__(self, address: str) -> None:
        super().__init__(f"{address} is not a valid IP address.")
        self.address = address


class HostfileInvocationError(HostfileError):
    """Raised for malformed command line invocations."""


class HostfileInvariantError(HostfileError):
    """Raised when an internal invariant is broken (a program defect)."""


class HostfileIOError(HostfileError):
    """Raised for file system failures other than absence or permissions."""


def translate_os_error(error: OSError, context: str) -> HostfileError:
    """Map an OS error onto the matching hostfile error.

    Args:
        error: Error raised by the file system call.
        context: Message prefix naming the failed action and path.

    Returns:
        Typed error for the caller to raise ``from error``.
    """
    if isinstance(error, FileNotFoundError):
        return HostfileSourceNotFoundError(
            f"{context}: file or parent directory does not exist. "
            "Provide an existing hosts file path."
        )
    if isinstance(error, IsADirectoryError):
        return HostfileSourceNotFoundError(
            f"{context}: path is a directory. Provide a hosts file path, not a directory."
        )
    if isinstance(error, PermissionError) or error.errno in _PERMISSION_ERRNOS:
        return HostfilePermissionError(f"{context}: {error.strerror or 'permission denied'}.")
    return HostfileIOError(f"{context}: {error.strerror or error}.")

