# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from spellindex.permutations import build_error_map, deletions, variants

import pytest


@pytest.mark.parametrize(
    ["word", "expected"],
    [
        ("", set()),
        ("a", {""}),
        ("aa", {"a"}),
        ("ab", {"a", "b"}),
        ("fork", {"ork", "frk", "fok", "for"}),
        ("bell", {"ell", "bll", "bel"}),
    ],
)
def test_deletions(word: str, expected: set[str]) -> None:
    assert deletions(word) == expected


def test_variants_includes_every_level() -> None:
    assert variants("fork", 2) == {
        "ork",
        "frk",
        "fok",
        "for",
        "rk",
        "ok",
        "or",
        "fk",
        "fr",
        "fo",
    }


def test_variants_stop_at_requested_distance() -> None:
    result = variants("fork", 2)
    assert "fork" not in result
    assert not any(len(variant) < 2 for variant in result)
    assert variants("fork", 1) == deletions("fork")
    assert variants("fork", 0) == set()


@pytest.mark.parametrize(
    ["word", "distance", "expected"],
    [
        ("", 2, set()),
        ("a", 2, {""}),
        ("ab", 5, {"a", "b", ""}),
        ("aaa", 2, {"aa", "a"}),
    ],
)
def test_variants_short_words(word: str, distance: int, expected: set[str]) -> None:
    assert variants(word, distance) == expected


def test_build_error_map_merges_shared_variants() -> None:
    error_map = build_error_map(["fork", "fort"], 2)
    assert error_map["for"] == {"fork", "fort"}
    assert error_map["fo"] == {"fork", "fort"}
    assert error_map["ork"] == {"fork"}
    assert error_map["ort"] == {"fort"}
    assert "fork" not in error_map
    assert set(error_map) == variants("fork", 2) | variants("fort", 2)
