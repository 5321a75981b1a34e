"""Unit tests for the document mutation engine."""

from __future__ import annotations

import pytest

from core.errors import HostfileAddressError
from core.types import (
    AddRequest,
    MappingEntry,
    MergeRequest,
    MutationSummary,
    PassthroughEntry,
    RemoveRequest,
    SubtractRequest,
)
from ingest.document_reader import parse_lines
from store.document import HostsDocument
from transforms.mutations import add, apply_mutations, find, merge, remove, subtract


def _mappings(document: HostsDocument) -> list[MappingEntry]:
    return [mapping for _, mapping in document.mappings()]


def test_add_overwrites_same_domain_and_kind() -> None:
    """A second add for the same domain and kind should upsert."""
    document = HostsDocument()

    add(document, "10.0.0.1", "a.test")
    add(document, "10.0.0.2", "a.test")

    assert document.entries() == (MappingEntry(ip="10.0.0.2", domain="a.test", kind="ipv4"),)


def test_add_keeps_ipv4_and_ipv6_independent() -> None:
    """IPv4 and IPv6 mappings for one domain should coexist."""
    document = HostsDocument()

    add(document, "10.0.0.1", "a.test")
    add(document, "::1", "a.test")

    assert [mapping.kind for mapping in _mappings(document)] == ["ipv4", "ipv6"]


def test_add_updates_in_place_and_appends_new_entries() -> None:
    """Updates keep their position; new mappings go to the end."""
    document = parse_lines(["10.0.0.1\ta.test\n", "# c\n", "10.0.0.2\tb.test\n"])

    add(document, "10.0.0.9", "a.test")
    add(document, "10.0.0.3", "c.test")

    assert document.entry_at(0) == MappingEntry(ip="10.0.0.9", domain="a.test", kind="ipv4")
    assert document.entry_at(3) == MappingEntry(ip="10.0.0.3", domain="c.test", kind="ipv4")


def test_add_stores_address_without_port() -> None:
    """Port suffixes should be dropped from added addresses."""
    document = HostsDocument()

    entry = add(document, "[::1]:8080", "a.test")

    assert entry == MappingEntry(ip="::1", domain="a.test", kind="ipv6")


def test_add_invalid_address_leaves_document_untouched() -> None:
    """An invalid address should fail before any mutation."""
    document = parse_lines(["10.0.0.1\ta.test\n"])
    before = document.entries()

    with pytest.raises(HostfileAddressError):
        add(document, "not-an-address", "a.test")

    assert document.entries() == before


def test_remove_scoped_to_kind() -> None:
    """A kind filter should leave other kinds of the domain alone."""
    document = parse_lines(["10.0.0.1\ta.test\n", "::1\ta.test\n"])

    removed = remove(document, "a.test", "ipv4")

    assert removed == 1
    assert document.entries() == (MappingEntry(ip="::1", domain="a.test", kind="ipv6"),)


def test_remove_any_deletes_every_kind() -> None:
    """The any filter should delete both address kinds."""
    document = parse_lines(["10.0.0.1\ta.test\n", "::1\ta.test\n", "10.0.0.2\tb.test\n"])

    removed = remove(document, "a.test")

    assert removed == 2 and [m.domain for m in _mappings(document)] == ["b.test"]


def test_remove_is_exhaustive_for_duplicates() -> None:
    """Duplicate mappings should all go in a single call."""
    document = parse_lines(
        ["10.0.0.1\tb.test\n", "# keep\n", "10.0.0.2\tb.test\n", "10.0.0.3\tb.test\n"]
    )

    removed = remove(document, "b.test", "any")

    assert removed == 3
    assert document.entries() == (PassthroughEntry(raw="# keep\n"),)


def test_remove_unknown_domain_is_a_no_op() -> None:
    """Removing an absent domain should change nothing."""
    document = parse_lines(["10.0.0.1\ta.test\n"])

    assert remove(document, "missing.test") == 0 and len(document) == 1


def test_merge_lets_source_win_and_ignores_passthrough() -> None:
    """Merged mappings should override targets; source comments are skipped."""
    target = parse_lines(["# target\n", "10.0.0.1\ta.test\n"])
    source = parse_lines(["# source\n", "10.0.0.2\ta.test\n", "10.0.0.3\tb.test\n"])

    applied = merge(target, source)

    assert applied == 2
    assert target.entries() == (
        PassthroughEntry(raw="# target\n"),
        MappingEntry(ip="10.0.0.2", domain="a.test", kind="ipv4"),
        MappingEntry(ip="10.0.0.3", domain="b.test", kind="ipv4"),
    )


def test_merge_applies_later_source_duplicates_last() -> None:
    """Within one merge the last duplicate of a domain and kind wins."""
    target = HostsDocument()
    source = parse_lines(["10.0.0.1\ta.test\n", "10.0.0.2\ta.test\n"])

    merge(target, source)

    assert _mappings(target) == [MappingEntry(ip="10.0.0.2", domain="a.test", kind="ipv4")]


def test_subtract_is_scoped_to_operand_kind() -> None:
    """Subtract should only remove the operand's own domain/kind pairs."""
    target = parse_lines(["10.0.0.1\ta.test\n", "::1\ta.test\n", "10.0.0.2\tb.test\n"])
    operand = parse_lines(["10.9.9.9\ta.test\n"])

    removed = subtract(target, operand)

    assert removed == 1
    assert [(m.domain, m.kind) for m in _mappings(target)] == [
        ("a.test", "ipv6"),
        ("b.test", "ipv4"),
    ]


def test_subtract_after_merge_removes_contributed_pairs_only() -> None:
    """Subtracting a merged document should leave unrelated entries alone."""
    document = parse_lines(["# hosts\n", "10.0.0.1\tkeep.test\n", "10.0.0.2\tshared.test\n"])
    other = parse_lines(["10.1.0.1\tnew.test\n", "10.1.0.2\tshared.test\n"])

    merge(document, other)
    subtract(document, other)

    assert document.entries() == (
        PassthroughEntry(raw="# hosts\n"),
        MappingEntry(ip="10.0.0.1", domain="keep.test", kind="ipv4"),
    )


def test_find_returns_matching_mappings_in_order() -> None:
    """Find should filter by domain and kind."""
    document = parse_lines(["10.0.0.1\ta.test\n", "::1\ta.test\n", "10.0.0.2\tb.test\n"])

    assert find(document, "a.test", "ipv6") == (
        MappingEntry(ip="::1", domain="a.test", kind="ipv6"),
    )
    assert len(find(document, "a.test")) == 2


def test_apply_mutations_counts_changes() -> None:
    """Batches should report added, updated, and removed counts."""
    document = parse_lines(["10.0.0.1\ta.test\n"])
    other = parse_lines(["10.0.0.5\tb.test\n"])

    summary = apply_mutations(
        document,
        (
            AddRequest(ip="10.0.0.2", domain="a.test"),
            AddRequest(ip="::1", domain="a.test"),
            MergeRequest(other=other),
            RemoveRequest(domain="a.test", kind_filter="ipv6"),
            SubtractRequest(other=other),
        ),
    )

    assert summary == MutationSummary(added=2, updated=1, removed=2)
    assert _mappings(document) == [MappingEntry(ip="10.0.0.2", domain="a.test", kind="ipv4")]


def test_apply_mutations_stops_at_first_invalid_address() -> None:
    """Requests after an invalid address should not be applied."""
    document = HostsDocument()

    with pytest.raises(HostfileAddressError):
        apply_mutations(
            document,
            (
                AddRequest(ip="10.0.0.1", domain="a.test"),
                AddRequest(ip="bogus", domain="b.test"),
                AddRequest(ip="10.0.0.3", domain="c.test"),
            ),
        )

    assert [m.domain for m in _mappings(document)] == ["a.test"]
