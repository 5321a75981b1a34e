"""Public SDK surface for hostfile.

This module provides a stable import path for library users.
It re-exports the document operations and typed models.
"""

from __future__ import annotations

from core.config import HostfileConfig
from core.errors import (
    HostfileAddressError,
    HostfileConfigError,
    HostfileError,
    HostfileInvariantError,
    HostfileInvocationError,
    HostfileIOError,
    HostfilePermissionError,
    HostfileSourceNotFoundError,
)
from core.types import (
    AddRequest,
    Entry,
    IpKind,
    KindFilter,
    MappingEntry,
    MergeRequest,
    MutationSummary,
    PassthroughEntry,
    RemoveRequest,
    RenderOptions,
    SubtractRequest,
)
from ingest.document_reader import load_document as load
from ingest.ip_classifier import classify, classify_address
from ingest.line_parser import parse_line
from render.serializer import render
from store.document import HostsDocument
from store.document_writer import save_document as save
from transforms.mutations import add, apply_mutations, find, merge, remove, subtract

__all__ = [
    "AddRequest",
    "Entry",
    "HostfileAddressError",
    "HostfileConfig",
    "HostfileConfigError",
    "HostfileError",
    "HostfileInvariantError",
    "HostfileInvocationError",
    "HostfileIOError",
    "HostfilePermissionError",
    "HostfileSourceNotFoundError",
    "HostsDocument",
    "IpKind",
    "KindFilter",
    "MappingEntry",
    "MergeRequest",
    "MutationSummary",
    "PassthroughEntry",
    "RemoveRequest",
    "RenderOptions",
    "SubtractRequest",
    "add",
    "apply_mutations",
    "classify",
    "classify_address",
    "find",
    "load",
    "merge",
    "parse_line",
    "remove",
    "render",
    "save",
    "subtract",
]
