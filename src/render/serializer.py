"""Hosts document serializer.

This module renders documents as canonical tab-separated lines or as
labeled human-readable blocks. Rendering is a pure function of the
document and the render options.
"""

from __future__ import annotations

from typing import TextIO

from core.constants import KIND_LABELS
from core.types import Entry, MappingEntry, PassthroughEntry, RenderOptions, unhandled_entry
from store.document import HostsDocument


def render(document: HostsDocument, options: RenderOptions) -> str:
    """Render a document according to ``options.mode``.

    Args:
        document: Document to render.
        options: Output mode and verbosity.

    Returns:
        Rendered text.
    """
    if options.mode == "human":
        return render_human(document, verbose=options.verbose)
    return render_raw(document)


def render_raw(document: HostsDocument) -> str:
    """Render canonical form; passthrough lines are emitted verbatim."""
    return "".join(_raw_line(entry) for entry in document.entries())


def render_human(document: HostsDocument, verbose: bool = False) -> str:
    """Render one labeled block per mapping, separated by blank lines.

    Args:
        document: Document to render.
        verbose: Include position and address kind in every block.

    Returns:
        Human-readable listing; passthrough entries are omitted.
    """
    blocks: list[str] = []
    for index, entry in enumerate(document.entries()):
        if isinstance(entry, MappingEntry):
            blocks.append(_human_block(index, entry, verbose))
        elif isinstance(entry, PassthroughEntry):
            continue
        else:
            unhandled_entry(entry)
    return "\n".join(blocks)


def write_rendered(document: HostsDocument, options: RenderOptions, stream: TextIO) -> None:
    """Write a rendering to an open text stream such as stdout."""
    stream.write(render(document, options))


def _raw_line(entry: Entry) -> str:
    if isinstance(entry, MappingEntry):
        return f"{entry.ip}\t{entry.domain}\n"
    if isinstance(entry, PassthroughEntry):
        return entry.raw
    unhandled_entry(entry)


def _human_block(index: int, entry: MappingEntry, verbose: bool) -> str:
    lines: list[str] = []
    if verbose:
        lines.append(f"Index: {index}")
        lines.append(f"Kind: {KIND_LABELS[entry.kind]}")
    lines.append(f"Address: {entry.ip}")
    lines.append(f"Domain: {entry.domain}")
    return "\n".join(lines) + "\n"
