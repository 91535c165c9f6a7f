# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .permutations import build_error_map, deletions, variants
from .word import Word
from typing import Collection, Iterable, Iterator

import logging

DEFAULT_ERROR_DISTANCE = 2
DEFAULT_FALLBACK_ROUNDS = 2


class Error(Exception):
    """Spelling index error"""


class InvariantViolation(Error):
    """The index is inconsistent: a candidate set is empty or refers to an unknown word"""


class Dictionary:
    """
    Deletion based spelling correction index.

    `word_map` holds every correctly spelled word. `error_map` maps each
    deletion variant of those words to the set of words producing it and is
    derived from `word_map` and `error_distance`.

    Memory and insertion time grow with C(len(word), error_distance) per word:
    a larger `error_distance` gives more recall at a much higher cost.
    `fallback_rounds` controls how many times the query itself is expanded
    when no direct hit exists, for an effective search radius of
    `error_distance * fallback_rounds` deletions.
    """

    def __init__(
        self,
        error_distance: int = DEFAULT_ERROR_DISTANCE,
        fallback_rounds: int = DEFAULT_FALLBACK_ROUNDS,
    ) -> None:
        self.log = logging.getLogger("spellindex")
        self.word_map: dict[str, Word] = {}
        self.error_map: dict[str, set[str]] = {}
        self.error_distance = error_distance
        self.fallback_rounds = fallback_rounds

    def __len__(self) -> int:
        return len(self.word_map)

    def __contains__(self, word: object) -> bool:
        return word in self.word_map

    def __iter__(self) -> Iterator[str]:
        return iter(self.word_map)

    def score(self, word: str) -> int | None:
        entry = self.word_map.get(word)
        return entry.score if entry is not None else None

    def words(self) -> list[Word]:
        """Known words, most frequent first"""
        return sorted(self.word_map.values(), key=_rank_key)

    def insert(self, word: str) -> None:
        entry = self.word_map.get(word)
        if entry is not None:
            entry.score += 1
        else:
            self.word_map[word] = Word(word, 1)

    def insert_with_count(self, word: str, count: int) -> None:
        self.insert(word)
        self.word_map[word].score = count

    def insert_with_permutations(self, word: str) -> None:
        self.insert(word)
        self._add_permutations(word)

    def insert_with_permutations_and_count(self, word: str, count: int) -> None:
        self.insert_with_count(word, count)
        self._add_permutations(word)

    def _add_permutations(self, word: str) -> None:
        for variant in variants(word, self.error_distance):
            self.error_map.setdefault(variant, set()).add(word)

    def rebuild_errors(self) -> None:
        """Replace the error index with one built from the known words alone"""
        self.error_map = build_error_map(self.word_map, self.error_distance)
        self.log.debug("rebuilt error index: %d words, %d variants", len(self.word_map), len(self.error_map))

    def expand_errors(self) -> None:
        """Widen the error index by a single deletion level.

        Every key longer than two characters passes its candidates on to each of
        its one character deletions. An empty index is seeded from the known
        words themselves. Repeated calls keep widening by one level each.
        """
        if self.error_map:
            source = self.error_map
        else:
            source = {word: {word} for word in self.word_map}

        result = {key: set(candidates) for key, candidates in self.error_map.items()}
        for key, candidates in source.items():
            if len(key) <= 2:
                continue
            for deleted in deletions(key):
                result.setdefault(deleted, set()).update(candidates)

        self.log.debug("expanded error index from %d to %d variants", len(self.error_map), len(result))
        self.error_map = result

    def select(self, candidates: Collection[str]) -> str:
        """Pick the candidate with the highest score, the first in text order on ties"""
        if not candidates:
            raise InvariantViolation("no candidates to choose from")
        return min(self._lookup_all(candidates), key=_rank_key).text

    def _lookup_all(self, candidates: Iterable[str]) -> Iterator[Word]:
        for candidate in candidates:
            entry = self.word_map.get(candidate)
            if entry is None:
                raise InvariantViolation("candidate {!r} is not a known word".format(candidate))
            yield entry

    def find(self, text: str) -> str | None:
        """Resolve `text` against the index without any further expansion"""
        entry = self.word_map.get(text)
        if entry is not None:
            return entry.text

        candidates = self.error_map.get(text)
        if candidates is None:
            return None
        if len(candidates) == 1:
            return next(iter(candidates))
        return self.select(candidates)

    def fallback_pool(self, query: str) -> list[str]:
        """The query and its deletion variants, expanded `fallback_rounds` times.

        Ordered by number of deletions first, then alphabetically.
        """
        pool = {query}
        for _ in range(self.fallback_rounds):
            for text in list(pool):
                pool.update(variants(text, self.error_distance))
        return sorted(pool, key=lambda text: (-len(text), text))

    def check(self, query: str) -> str | None:
        """Best correction for `query`, None when nothing is reachable"""
        match = self.find(query)
        if match is not None:
            return match

        for text in self.fallback_pool(query):
            match = self.find(text)
            if match is not None:
                return match
        return None

    def suggestions(self, query: str, limit: int | None = None) -> list[Word]:
        """Every known word reachable from `query`, best first"""
        found: set[str] = set()
        for text in self.fallback_pool(query):
            if text in self.word_map:
                found.add(text)
            found.update(self.error_map.get(text, ()))
        ranked = sorted(self._lookup_all(found), key=_rank_key)
        return ranked if limit is None else ranked[:limit]


def _rank_key(word: Word) -> tuple[int, str]:
    return -word.score, word.text
