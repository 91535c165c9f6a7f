# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from typing import Any


class Word:
    """A correctly spelled word and its frequency score, higher is preferred.

    `text` is fixed at creation, only `score` changes.
    """

    __slots__ = ("_text", "score")

    def __init__(self, text: str, score: int = 1) -> None:
        self._text = text
        self.score = score

    @property
    def text(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._text == other._text and self.score == other.score

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Word(text={!r}, score={!r})".format(self._text, self.score)

    def to_dict(self) -> dict[str, Any]:
        return {"word": self._text, "score": self.score}
