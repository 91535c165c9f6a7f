# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from spellindex.dictionary import Dictionary
from spellindex.word import Word

import pytest


def test_score_is_mutable() -> None:
    word = Word("bell")
    assert word.score == 1
    word.score = 32
    assert word.to_dict() == {"word": "bell", "score": 32}
    assert word == Word("bell", 32)
    assert repr(word) == "Word(text='bell', score=32)"


def test_text_is_read_only() -> None:
    word = Word("bell", 32)
    with pytest.raises(AttributeError):
        word.text = "belly"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        word.other = 1  # type: ignore[attr-defined]
    assert word.text == "bell"


def test_dictionary_keeps_word_text() -> None:
    dictionary = Dictionary()
    dictionary.insert_with_count("bell", 3)
    dictionary.insert("bell")
    entry = dictionary.word_map["bell"]
    assert entry.text == "bell"
    assert entry.score == 4
    with pytest.raises(AttributeError):
        entry.text = "ball"  # type: ignore[misc]
