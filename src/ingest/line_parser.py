"""Raw line to entry parsing.

This module turns one hosts line into a mapping or passthrough entry.
Grammar mismatches are never errors; they are kept verbatim.
"""

from __future__ import annotations

import re

from core.constants import COMMENT_PREFIX, ENTRY_PATTERN
from core.types import Entry, MappingEntry, PassthroughEntry
from ingest.ip_classifier import classify_address

_ENTRY_RE = re.compile(ENTRY_PATTERN)


def parse_line(raw_line: str) -> Entry:
    """Parse one raw line, terminator included.

    Args:
        raw_line: Line text as read from the source.

    Returns:
        A mapping entry for ``<address> <domain>`` lines, otherwise a
        passthrough entry holding the untouched line.

    Raises:
        HostfileAddressError: If a mapping-shaped line has an invalid address.
    """
    if raw_line.startswith(COMMENT_PREFIX):
        return PassthroughEntry(raw=raw_line)
    match = _ENTRY_RE.fullmatch(raw_line)
    if match is None:
        return PassthroughEntry(raw=raw_line)
    classified = classify_address(match.group(1))
    return MappingEntry(ip=classified.address, domain=match.group(2), kind=classified.kind)
