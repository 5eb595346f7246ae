"""Comparison helpers and path utilities shared across the package."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]
"""A three-way comparison: zero if equal, positive if a > b, negative if a < b."""


def intcmp(a: int, b: int) -> int:
    """Compare two integers three-way."""
    return a - b


def charcmp(a: str, b: str) -> int:
    """Compare two single characters three-way by code point."""
    return ord(a) - ord(b)


def basename(fpathlike: str) -> str:
    """Return the part of a path after its last '/' (the whole path if none)."""
    return fpathlike.rpartition("/")[2]