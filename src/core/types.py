"""Shared typed models.

This module defines immutable entry, option, and request models used by
ingest, store, transforms, and render layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, NoReturn, Union

from core.errors import HostfileInvariantError

if TYPE_CHECKING:
    from store.document import HostsDocument

IpKind = Literal["ipv4", "ipv6"]
KindFilter = Literal["ipv4", "ipv6", "any"]
RenderMode = Literal["raw", "human"]


@dataclass(frozen=True)
class MappingEntry:
    """Committed address-to-domain binding.

    Attributes:
        ip: Bare address literal, never a host:port pair.
        domain: Domain name bound to the address.
        kind: Classified address family.
    """

    ip: str
    domain: str
    kind: IpKind


@dataclass(frozen=True)
class PassthroughEntry:
    """Line retained verbatim, including its own terminator.

    Attributes:
        raw: Original line text.
    """

    raw: str


Entry = Union[MappingEntry, PassthroughEntry]


@dataclass(frozen=True)
class ClassifiedAddress:
    """Address literal with its port stripped and family resolved."""

    address: str
    kind: IpKind


@dataclass(frozen=True)
class RenderOptions:
    """Serializer output configuration.

    Attributes:
        mode: ``raw`` for canonical form, ``human`` for labeled blocks.
        verbose: Include kind and position in human blocks.
    """

    mode: RenderMode = "raw"
    verbose: bool = False


@dataclass(frozen=True)
class AddRequest:
    """Upsert one mapping."""

    ip: str
    domain: str


@dataclass(frozen=True)
class RemoveRequest:
    """Remove every mapping of a domain matching a kind filter."""

    domain: str
    kind_filter: KindFilter = "any"


@dataclass(frozen=True)
class MergeRequest:
    """Union another document's mappings into the target."""

    other: "HostsDocument"


@dataclass(frozen=True)
class SubtractRequest:
    """Remove another document's domain/kind pairs from the target."""

    other: "HostsDocument"


MutationRequest = Union[AddRequest, RemoveRequest, MergeRequest, SubtractRequest]


@dataclass(frozen=True)
class MutationSummary:
    """Counts produced by a batch of mutation requests.

    Attributes:
        added: Mappings appended as new entries.
        updated: Existing mappings whose address was replaced.
        removed: Mappings deleted from the document.
    """

    added: int = 0
    updated: int = 0
    removed: int = 0


def unhandled_entry(entry: NoReturn) -> NoReturn:
    """Fail loudly for an entry value outside the two known cases.

    Args:
        entry: Value that matched neither entry type.

    Raises:
        HostfileInvariantError: Always.
    """
    raise HostfileInvariantError(
        f"Unhandled entry variant {type(entry).__name__}: "
        "expected MappingEntry or PassthroughEntry."
    )


def unhandled_request(request: NoReturn) -> NoReturn:
    """Fail loudly for a mutation request of an unknown type.

    Raises:
        HostfileInvariantError: Always.
    """
    raise HostfileInvariantError(
        f"Unhandled mutation request {type(request).__name__}."
    )
