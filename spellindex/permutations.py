# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Deletion variants of words, the keys of the error index"""
from __future__ import annotations

from typing import Iterable


def deletions(word: str) -> set[str]:
    """All strings one character deletion away from `word`."""
    return {word[:i] + word[i + 1 :] for i in range(len(word))}


def variants(word: str, distance: int) -> set[str]:
    """All strings 1 to `distance` character deletions away from `word`.

    Every level is included, not only the deepest one. `word` itself is never
    part of the result.
    """
    result: set[str] = set()
    frontier = {word}
    for _ in range(distance):
        frontier = {deleted for candidate in frontier for deleted in deletions(candidate)}
        if not frontier:
            break
        result |= frontier
    return result


def build_error_map(words: Iterable[str], distance: int) -> dict[str, set[str]]:
    """
    Build an error index from scratch: every deletion variant of every word,
    mapped to the set of words producing it.

    eg. build_error_map(["bell", "belly"], 1) yields:
        * "bel": {"bell"}
        * "bell": {"belly"}
        * "bely": {"belly"}
        * ...
    """
    error_map: dict[str, set[str]] = {}
    for word in words:
        for variant in variants(word, distance):
            error_map.setdefault(variant, set()).add(word)
    return error_map
