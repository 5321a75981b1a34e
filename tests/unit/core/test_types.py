"""Unit tests for shared typed models."""

from __future__ import annotations

import pytest

from core.errors import HostfileInvariantError
from core.types import RenderOptions, unhandled_entry, unhandled_request


def test_render_options_default_to_canonical_form() -> None:
    """Default render options should select raw, non-verbose output."""
    options = RenderOptions()

    assert options.mode == "raw" and options.verbose is False


def test_unhandled_entry_raises_invariant_error() -> None:
    """Unknown entry variants should surface as a program defect."""
    with pytest.raises(HostfileInvariantError, match="str"):
        unhandled_entry("not an entry")  # type: ignore[arg-type]


def test_unhandled_request_raises_invariant_error() -> None:
    """Unknown mutation requests should surface as a program defect."""
    with pytest.raises(HostfileInvariantError):
        unhandled_request(42)  # type: ignore[arg-type]
