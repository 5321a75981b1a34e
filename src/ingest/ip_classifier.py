"""IP address classification.

This module strips optional port suffixes and resolves address families.
Failures raise instead of exiting so callers choose how fatal they are.
"""

from __future__ import annotations

import ipaddress
import re

from core.constants import IPV4_PORT_PATTERN, IPV6_PORT_PATTERN
from core.errors import HostfileAddressError
from core.types import ClassifiedAddress, IpKind

_IPV4_PORT_RE = re.compile(IPV4_PORT_PATTERN)
_IPV6_PORT_RE = re.compile(IPV6_PORT_PATTERN)


def classify_address(text: str) -> ClassifiedAddress:
    """Classify address text and strip any port suffix.

    Args:
        text: Address as written, e.g. ``10.0.0.1``, ``10.0.0.1:80``
            or ``[::1]:8080``.

    Returns:
        Bare address literal and its family.

    Raises:
        HostfileAddressError: If the address is neither IPv4 nor IPv6.
    """
    address = strip_port(text)
    try:
        ipaddress.IPv4Address(address)
    except ValueError:
        pass
    else:
        return ClassifiedAddress(address=address, kind="ipv4")
    try:
        ipaddress.IPv6Address(address)
    except ValueError as error:
        raise HostfileAddressError(address) from error
    return ClassifiedAddress(address=address, kind="ipv6")


def classify(text: str) -> IpKind:
    """Return only the address family of ``text``.

    Raises:
        HostfileAddressError: If the address is neither IPv4 nor IPv6.
    """
    return classify_address(text).kind


def strip_port(text: str) -> str:
    """Drop an ``addr:port`` or ``[addr]:port`` suffix when present."""
    match = _IPV4_PORT_RE.match(text) or _IPV6_PORT_RE.match(text)
    if match is None:
        return text
    return match.group(1)
