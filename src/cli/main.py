"""Hostfile CLI entry points.

This module exposes commands for listing and editing hosts files.
It maps argparse commands onto SDK calls and errors onto exit statuses.
"""

from __future__ import annotations

import argparse
import io
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any, NoReturn, Sequence, TextIO

from core.config import HostfileConfig, parse_log_level
from core.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_INVALID_ADDRESS,
    EXIT_INVALID_ARGUMENTS,
    EXIT_INVARIANT_VIOLATION,
    EXIT_IO_ERROR,
    EXIT_PERMISSION_DENIED,
    EXIT_SOURCE_NOT_FOUND,
    EXIT_SUCCESS,
    FILE_ENCODING,
    FILE_ENCODING_ERRORS,
    STDIN_SOURCE,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import (
    HostfileAddressError,
    HostfileConfigError,
    HostfileError,
    HostfileInvocationError,
    HostfileIOError,
    HostfilePermissionError,
    HostfileSourceNotFoundError,
)
from core.logging_config import configure_logging
from core.types import (
    AddRequest,
    MergeRequest,
    MutationRequest,
    RemoveRequest,
    RenderOptions,
    SubtractRequest,
)
from ingest.document_reader import load_document
from render.serializer import write_rendered
from store.document import HostsDocument
from store.document_writer import save_document
from transforms.mutations import apply_mutations, find

_KIND_CHOICES = ("ipv4", "ipv6", "any")
_EXIT_STATUSES: tuple[tuple[type[HostfileError], int], ...] = (
    (HostfileSourceNotFoundError, EXIT_SOURCE_NOT_FOUND),
    (HostfileConfigError, EXIT_CONFIG_ERROR),
    (HostfileInvocationError, EXIT_INVALID_ARGUMENTS),
    (HostfileAddressError, EXIT_INVALID_ADDRESS),
    (HostfilePermissionError, EXIT_PERMISSION_DENIED),
    (HostfileIOError, EXIT_IO_ERROR),
)


class _HostfileArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad input."""

    def error(self, message: str) -> NoReturn:
        raise HostfileInvocationError(f"{self.prog}: {message}")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = _HostfileArgumentParser(
        prog="hostfile",
        description="Command line interface for editing hosts files",
    )
    parser.add_argument("--file", help="Override HOSTFILE_PATH for this command")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the edited hosts file instead of writing it",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show address kind and position in listings",
    )
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override HOSTFILE_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_list_command(subparsers)
    _add_echo_command(subparsers)
    _add_show_command(subparsers)
    _add_add_command(subparsers)
    _add_remove_command(subparsers)
    _add_merge_command(subparsers)
    _add_subtract_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the hostfile CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = _build_config(args.file, args.log_level)
        configure_logging(config.log_level)
        return _run_command(config, args)
    except HostfileError as error:
        _report_error(error)
        return exit_status_for(error)


def exit_status_for(error: HostfileError) -> int:
    """Map an error onto its stable process exit status.

    Args:
        error: Raised hostfile error.

    Returns:
        Exit status; unknown kinds are treated as invariant violations.
    """
    for error_type, status in _EXIT_STATUSES:
        if isinstance(error, error_type):
            return status
    return EXIT_INVARIANT_VIOLATION


def _build_config(file_path: str | None, log_level: str | None) -> HostfileConfig:
    """Build config with optional CLI overrides.

    Args:
        file_path: Optional hosts file path override.
        log_level: Optional log level override.

    Returns:
        Effective runtime configuration.
    """
    config = HostfileConfig.from_env()
    if file_path:
        config = replace(config, hosts_path=Path(file_path).expanduser())
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config


def _run_command(config: HostfileConfig, args: argparse.Namespace) -> int:
    """Dispatch parsed args to a command handler.

    Args:
        config: Effective runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if args.command == "list":
        return _run_list_command(config, args)
    if args.command == "echo":
        return _run_echo_command(config)
    if args.command == "show":
        return _run_show_command(config, args)
    if args.command in ("add", "remove", "merge", "subtract"):
        return _run_mutation_command(config, args, _build_requests(args))
    raise HostfileInvocationError(f"Unsupported command: {args.command}")


def _run_list_command(config: HostfileConfig, args: argparse.Namespace) -> int:
    """Handle list command."""
    document = load_document(config.hosts_path)
    write_rendered(document, RenderOptions(mode="human", verbose=args.verbose), _stdout())
    return EXIT_SUCCESS


def _run_echo_command(config: HostfileConfig) -> int:
    """Handle echo command."""
    document = load_document(config.hosts_path)
    write_rendered(document, RenderOptions(mode="raw"), _stdout())
    return EXIT_SUCCESS


def _run_show_command(config: HostfileConfig, args: argparse.Namespace) -> int:
    """Handle show command by printing matching mappings in canonical form."""
    document = load_document(config.hosts_path)
    matches = HostsDocument(list(find(document, args.domain, args.kind)))
    write_rendered(matches, RenderOptions(mode="raw"), _stdout())
    return EXIT_SUCCESS


def _run_mutation_command(
    config: HostfileConfig,
    args: argparse.Namespace,
    requests: tuple[MutationRequest, ...],
) -> int:
    """Load, mutate, then write or preview the hosts file.

    Args:
        config: Effective runtime configuration.
        args: Parsed CLI args.
        requests: Ordered mutation requests.

    Returns:
        Exit code.
    """
    document = load_document(config.hosts_path)
    summary = apply_mutations(document, requests)
    if args.dry_run:
        write_rendered(document, RenderOptions(mode="raw"), _stdout())
        return EXIT_SUCCESS
    save_document(document, config.hosts_path)
    print(f"added={summary.added} updated={summary.updated} removed={summary.removed}")
    return EXIT_SUCCESS


def _build_requests(args: argparse.Namespace) -> tuple[MutationRequest, ...]:
    """Translate mutating command args into mutation requests."""
    if args.command == "add":
        return (AddRequest(ip=args.ip, domain=args.domain),)
    if args.command == "remove":
        return (RemoveRequest(domain=args.domain, kind_filter=args.kind),)
    other = _load_operand(args.other)
    if args.command == "merge":
        return (MergeRequest(other=other),)
    return (SubtractRequest(other=other),)


def _load_operand(source: str) -> HostsDocument:
    """Load the second document of a merge or subtract."""
    if source != STDIN_SOURCE:
        return load_document(Path(source).expanduser())
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return load_document(sys.stdin)
    stream = io.TextIOWrapper(
        buffer, encoding=FILE_ENCODING, errors=FILE_ENCODING_ERRORS, newline=""
    )
    try:
        return load_document(stream)
    finally:
        stream.detach()


def _stdout() -> TextIO:
    """Return stdout set up to pass undecodable hosts bytes through."""
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors=FILE_ENCODING_ERRORS)
    return sys.stdout


def _report_error(error: HostfileError) -> None:
    """Print an error and, for permission failures, a privilege hint."""
    print(f"error: {error}", file=sys.stderr)
    if isinstance(error, HostfilePermissionError):
        print(
            "hint: editing system hosts files requires root privileges; "
            "retry with sudo or an administrator shell.",
            file=sys.stderr,
        )


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    subparsers.add_parser("list", help="List all mappings in human-readable form")


def _add_echo_command(subparsers: Any) -> None:
    """Register echo subcommand."""
    subparsers.add_parser("echo", help="Print the hosts file in canonical form")


def _add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print the mappings of one domain")
    parser.add_argument("domain", help="Domain name")
    parser.add_argument("--kind", choices=_KIND_CHOICES, default="any", help="Address kind")


def _add_add_command(subparsers: Any) -> None:
    """Register add subcommand."""
    parser = subparsers.add_parser("add", help="Add or update a mapping")
    parser.add_argument("domain", help="Domain name")
    parser.add_argument("ip", help="IPv4 or IPv6 address, optionally with a port")


def _add_remove_command(subparsers: Any) -> None:
    """Register remove subcommand."""
    parser = subparsers.add_parser("remove", help="Remove every mapping of a domain")
    parser.add_argument("domain", help="Domain name")
    parser.add_argument(
        "--kind",
        choices=_KIND_CHOICES,
        default="any",
        help="Only remove mappings of this address kind",
    )


def _add_merge_command(subparsers: Any) -> None:
    """Register merge subcommand."""
    parser = subparsers.add_parser("merge", help="Add every mapping of another hosts file")
    parser.add_argument("other", help="Hosts file to merge in, or - for stdin")


def _add_subtract_command(subparsers: Any) -> None:
    """Register subtract subcommand."""
    parser = subparsers.add_parser(
        "subtract",
        help="Remove every domain/kind pair found in another hosts file",
    )
    parser.add_argument("other", help="Hosts file to subtract, or - for stdin")
