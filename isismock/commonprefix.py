"""Longest common prefix of a group of strings."""

from __future__ import annotations

from collections.abc import Iterable


def common_prefix(strings: Iterable[str]) -> str:
    """Return the longest prefix shared by all ``strings``; they must not be empty."""
    items = list(strings)
    if not items:
        raise ValueError("common_prefix() needs at least one string")
    shortest = min(items, key=len)
    for i, char in enumerate(shortest):
        if any(s[i] != char for s in items):
            return shortest[:i]
    return shortest