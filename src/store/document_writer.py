"""Hosts document persistence.

This module writes a rendered document to a file path or text stream.
Rendering happens before the destination is opened, so a failed render
never truncates the target file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO, Union

from core.constants import FILE_ENCODING, FILE_ENCODING_ERRORS
from core.errors import translate_os_error
from core.logging_config import get_logger
from core.types import RenderOptions
from render.serializer import render
from store.document import HostsDocument

_LOGGER = get_logger(__name__)

DocumentDestination = Union[str, Path, TextIO]


def save_document(
    document: HostsDocument,
    destination: DocumentDestination,
    options: RenderOptions | None = None,
) -> None:
    """Render and write a document.

    Args:
        document: Document to persist.
        destination: File path to overwrite, or a writable text stream.
        options: Render options; canonical raw form when omitted.

    Raises:
        HostfileSourceNotFoundError: If the destination directory is missing.
        HostfilePermissionError: If the destination is not writable, including
            read-only file systems.
        HostfileIOError: For any other file system failure, e.g. a full disk.
    """
    text = render(document, options or RenderOptions())
    if not isinstance(destination, (str, Path)):
        destination.write(text)
        return
    path = Path(destination)
    try:
        with path.open(
            "w", encoding=FILE_ENCODING, errors=FILE_ENCODING_ERRORS, newline=""
        ) as handle:
            handle.write(text)
    except OSError as error:
        raise translate_os_error(error, f"Failed to write hosts file at {path}") from error
    _LOGGER.info("document_saved", destination=str(path), entry_count=len(document))
