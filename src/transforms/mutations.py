"""Document mutation engine.

This module implements upsert, scoped removal, merge, and subtract
over a hosts document. Only mapping entries take part in set
operations; passthrough lines are never touched.
"""

from __future__ import annotations

from typing import Iterable

from core.logging_config import get_logger
from core.types import (
    AddRequest,
    KindFilter,
    MappingEntry,
    MergeRequest,
    MutationRequest,
    MutationSummary,
    RemoveRequest,
    SubtractRequest,
    unhandled_request,
)
from ingest.ip_classifier import classify_address
from store.document import HostsDocument

_LOGGER = get_logger(__name__)


def add(document: HostsDocument, ip_text: str, domain_text: str) -> MappingEntry:
    """Add or overwrite the mapping for a domain and address kind.

    An IPv4 and an IPv6 mapping for the same domain are independent
    entries. New mappings are appended after every existing entry.

    Args:
        document: Document to mutate.
        ip_text: Address, optionally with a port suffix.
        domain_text: Domain name.

    Returns:
        The committed mapping entry.

    Raises:
        HostfileAddressError: If ``ip_text`` is invalid; the document is
            left unchanged.
    """
    return _upsert(document, ip_text, domain_text)[0]


def remove(document: HostsDocument, domain_text: str, kind_filter: KindFilter = "any") -> int:
    """Delete every mapping of a domain that matches ``kind_filter``.

    Args:
        document: Document to mutate.
        domain_text: Domain whose mappings are removed.
        kind_filter: ``ipv4``, ``ipv6``, or ``any``.

    Returns:
        Number of mappings removed.
    """
    removed_count = document.remove_where(
        lambda entry: isinstance(entry, MappingEntry)
        and _matches(entry, domain_text, kind_filter)
    )
    if removed_count:
        _LOGGER.info(
            "mappings_removed",
            domain=domain_text,
            kind_filter=kind_filter,
            removed=removed_count,
        )
    return removed_count


def merge(into_document: HostsDocument, from_document: HostsDocument) -> int:
    """Upsert every mapping of ``from_document`` into ``into_document``.

    Mappings are applied in source order, so a later duplicate of the same
    domain and kind wins over an earlier one.

    Returns:
        Number of mappings applied.

    Raises:
        HostfileAddressError: If a source mapping holds an invalid address;
            mappings applied before it stay applied.
    """
    added, updated = _merge_counts(into_document, from_document)
    return added + updated


def subtract(into_document: HostsDocument, from_document: HostsDocument) -> int:
    """Remove each domain/kind pair of ``from_document`` from ``into_document``.

    Removal is scoped to the kind recorded on each operand mapping. This is
    not an inverse of :func:`merge` when merge overwrote an address.

    Returns:
        Total number of mappings removed.
    """
    removed = 0
    for _, mapping in from_document.mappings():
        removed += remove(into_document, mapping.domain, mapping.kind)
    _LOGGER.info("document_subtracted", removed=removed)
    return removed


def find(
    document: HostsDocument,
    domain_text: str,
    kind_filter: KindFilter = "any",
) -> tuple[MappingEntry, ...]:
    """Return mappings of a domain matching ``kind_filter``, in order."""
    return tuple(
        mapping
        for _, mapping in document.mappings()
        if _matches(mapping, domain_text, kind_filter)
    )


def apply_mutations(
    document: HostsDocument,
    requests: Iterable[MutationRequest],
) -> MutationSummary:
    """Apply an ordered batch of mutation requests.

    The first failure stops the batch; later requests are not applied.

    Args:
        document: Document to mutate.
        requests: Requests in application order.

    Returns:
        Counts of added, updated, and removed mappings.

    Raises:
        HostfileAddressError: If any request carries an invalid address.
    """
    added = 0
    updated = 0
    removed = 0
    for request in requests:
        if isinstance(request, AddRequest):
            was_update = _upsert(document, request.ip, request.domain)[1]
            updated += int(was_update)
            added += int(not was_update)
        elif isinstance(request, RemoveRequest):
            removed += remove(document, request.domain, request.kind_filter)
        elif isinstance(request, MergeRequest):
            merge_added, merge_updated = _merge_counts(document, request.other)
            added += merge_added
            updated += merge_updated
        elif isinstance(request, SubtractRequest):
            removed += subtract(document, request.other)
        else:
            unhandled_request(request)
    return MutationSummary(added=added, updated=updated, removed=removed)


def _merge_counts(into_document: HostsDocument, from_document: HostsDocument) -> tuple[int, int]:
    """Upsert all source mappings and return ``(added, updated)`` counts."""
    added = 0
    updated = 0
    for _, mapping in from_document.mappings():
        was_update = _upsert(into_document, mapping.ip, mapping.domain)[1]
        updated += int(was_update)
        added += int(not was_update)
    _LOGGER.info("document_merged", added=added, updated=updated)
    return added, updated


def _upsert(document: HostsDocument, ip_text: str, domain_text: str) -> tuple[MappingEntry, bool]:
    """Upsert a mapping and report whether an existing entry was replaced."""
    classified = classify_address(ip_text)
    entry = MappingEntry(ip=classified.address, domain=domain_text, kind=classified.kind)
    for index, mapping in document.mappings():
        if mapping.domain == domain_text and mapping.kind == classified.kind:
            document.replace_at(index, entry)
            _LOGGER.info(
                "mapping_updated",
                domain=domain_text,
                kind=classified.kind,
                previous_ip=mapping.ip,
                ip=classified.address,
            )
            return entry, True
    document.append(entry)
    _LOGGER.info("mapping_added", domain=domain_text, kind=classified.kind, ip=classified.address)
    return entry, False


def _matches(mapping: MappingEntry, domain_text: str, kind_filter: KindFilter) -> bool:
    if mapping.domain != domain_text:
        return False
    return kind_filter == "any" or mapping.kind == kind_filter
