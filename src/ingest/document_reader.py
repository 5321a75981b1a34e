"""Hosts document loading.

This module reads a hosts file from a path or an open text stream.
It maps OS failures onto typed errors the CLI can report precisely.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO, Union

from core.constants import FILE_ENCODING, FILE_ENCODING_ERRORS
from core.errors import translate_os_error
from core.logging_config import get_logger
from ingest.line_parser import parse_line
from store.document import HostsDocument

_LOGGER = get_logger(__name__)

DocumentSource = Union[str, Path, TextIO]


def load_document(source: DocumentSource) -> HostsDocument:
    """Load a hosts document.

    Args:
        source: File path, or a readable text stream opened with
            ``newline=""`` when terminators must be preserved exactly.

    Returns:
        Document holding one entry per input line, in file order.

    Raises:
        HostfileSourceNotFoundError: If the path does not name a file.
        HostfilePermissionError: If the file cannot be read.
        HostfileAddressError: If a mapping line carries an invalid address.
    """
    if isinstance(source, (str, Path)):
        return _load_path(Path(source))
    document = parse_lines(source)
    _LOGGER.debug("document_loaded", source="<stream>", entry_count=len(document))
    return document


def parse_lines(lines: Iterable[str]) -> HostsDocument:
    """Build a document from raw lines, terminators included."""
    document = HostsDocument()
    for raw_line in lines:
        document.append(parse_line(raw_line))
    return document


def _load_path(path: Path) -> HostsDocument:
    """Read and parse a hosts file from disk.

    Args:
        path: Hosts file path.

    Returns:
        Parsed document.

    Raises:
        HostfileSourceNotFoundError: If the path is missing or a directory.
        HostfilePermissionError: If read permission is denied.
        HostfileIOError: For any other file system failure.
    """
    try:
        with path.open(
            "r", encoding=FILE_ENCODING, errors=FILE_ENCODING_ERRORS, newline=""
        ) as handle:
            document = parse_lines(handle)
    except OSError as error:
        raise translate_os_error(error, f"Failed to read hosts file at {path}") from error
    _LOGGER.debug("document_loaded", source=str(path), entry_count=len(document))
    return document
